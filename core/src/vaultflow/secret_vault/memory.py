"""In-memory secret store for testing and development.

This module provides the InMemorySecretStore class which implements the
SecretStoreClient protocol without requiring access to AWS.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Tuple

from botocore.exceptions import ClientError

from vaultflow.constants import RESOURCE_EXISTS_CODE, RESOURCE_NOT_FOUND_CODE, RequestField


class InMemorySecretStore:
    """In-memory stand-in for AWS Secrets Manager.

    Stores one SecretString per name and reports failures the same way the
    real service does, as botocore ClientError with the service error code.
    Every call is recorded so tests can assert on the exact requests made.

    Attributes:
        secrets: Mapping of secret name to stored SecretString
        calls: (operation, request) for every call, in order
    """

    ARN_PREFIX = "arn:aws:secretsmanager:us-east-1:000000000000:secret:"

    def __init__(self, seed: Optional[Dict[str, str]] = None):
        """Initialize the store.

        Args:
            seed: Initial secret name -> SecretString mappings
        """
        self.secrets: Dict[str, str] = dict(seed or {})
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def _error(self, code: str, message: str, operation: str) -> ClientError:
        return ClientError(
            {"Error": {"Code": code, "Message": message}},
            operation,
        )

    def _not_found(self, operation: str) -> ClientError:
        return self._error(
            RESOURCE_NOT_FOUND_CODE,
            "Secrets Manager can't find the specified secret.",
            operation,
        )

    def _response(self, name: str) -> Dict[str, Any]:
        return {
            "ARN": f"{self.ARN_PREFIX}{name}",
            "Name": name,
            "VersionId": str(uuid.uuid4()),
        }

    def create_secret(self, request: Mapping[str, Any]) -> Dict[str, Any]:
        self.calls.append(("CreateSecret", dict(request)))
        name = request[RequestField.NAME.value]
        if name in self.secrets:
            raise self._error(
                RESOURCE_EXISTS_CODE,
                f"The operation failed because the secret {name} already exists.",
                "CreateSecret",
            )
        self.secrets[name] = request.get(RequestField.SECRET_STRING.value, "")
        return self._response(name)

    def update_secret(self, request: Mapping[str, Any]) -> Dict[str, Any]:
        self.calls.append(("UpdateSecret", dict(request)))
        secret_id = request[RequestField.SECRET_ID.value]
        if secret_id not in self.secrets:
            raise self._not_found("UpdateSecret")
        self.secrets[secret_id] = request.get(RequestField.SECRET_STRING.value, "")
        return self._response(secret_id)

    def delete_secret(self, request: Mapping[str, Any]) -> Dict[str, Any]:
        self.calls.append(("DeleteSecret", dict(request)))
        secret_id = request[RequestField.SECRET_ID.value]
        if secret_id not in self.secrets:
            raise self._not_found("DeleteSecret")
        del self.secrets[secret_id]
        return {
            "ARN": f"{self.ARN_PREFIX}{secret_id}",
            "Name": secret_id,
            "DeletionDate": datetime.now(timezone.utc),
        }

    def get_secret_value(self, request: Mapping[str, Any]) -> Dict[str, Any]:
        self.calls.append(("GetSecretValue", dict(request)))
        secret_id = request[RequestField.SECRET_ID.value]
        if secret_id not in self.secrets:
            raise self._not_found("GetSecretValue")
        return {
            **self._response(secret_id),
            "SecretString": self.secrets[secret_id],
            "VersionStages": ["AWSCURRENT"],
        }

    def operations(self) -> List[str]:
        """Return the names of the operations called so far, in order."""
        return [operation for operation, _ in self.calls]
