from enum import Enum


class RequestField(str, Enum):
    """Secrets Manager request fields the provider sets itself.

    Caller options may carry any other field; these four are always
    overridden or filled in by the provider.
    """
    SECRET_ID = "SecretId"
    NAME = "Name"
    SECRET_STRING = "SecretString"
    CLIENT_REQUEST_TOKEN = "ClientRequestToken"


# Error codes reported by Secrets Manager in ClientError responses
RESOURCE_NOT_FOUND_CODE = "ResourceNotFoundException"
RESOURCE_EXISTS_CODE = "ResourceExistsException"

# Random bytes behind a generated ClientRequestToken
REQUEST_TOKEN_BYTES = 32

SECRETS_MANAGER_SERVICE = "secretsmanager"
