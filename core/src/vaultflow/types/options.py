"""Request options passed through to the remote secret store."""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_pascal

from vaultflow.types.base import VaultBaseModel


class RequestOptions(VaultBaseModel):
    """Typed option bag merged into outgoing Secrets Manager requests.

    Known fields are declared in snake_case and rendered with their wire
    names (``ClientRequestToken``, ``KmsKeyId``, ...). Any extra keyword is
    kept as given and forwarded unchanged, so options the transport accepts
    but this model does not name still reach the remote store.

    Example:
        >>> opts = RequestOptions(description="db creds", Tags=[{"Key": "team", "Value": "data"}])
        >>> opts.to_request()
        {'Description': 'db creds', 'Tags': [{'Key': 'team', 'Value': 'data'}]}
    """
    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="allow",
    )

    client_request_token: Optional[str] = None
    description: Optional[str] = None
    kms_key_id: Optional[str] = None
    version_id: Optional[str] = None
    version_stage: Optional[str] = None
    recovery_window_in_days: Optional[int] = Field(None, ge=7, le=30)
    force_delete_without_recovery: Optional[bool] = None

    def to_request(self) -> Dict[str, Any]:
        """Render the options as a Secrets Manager request mapping.

        Declared fields left as None are omitted. Extra keys are forwarded
        exactly as given, None values included, the same as a plain mapping.
        """
        request = self.model_dump(by_alias=True, exclude_none=True)
        request.update(self.model_extra or {})
        return request


Options = Union[RequestOptions, Mapping[str, Any], None]


def build_request(options: Options, **fields: Any) -> Dict[str, Any]:
    """Merge caller options with provider-controlled request fields.

    The caller's mapping is copied, never mutated. Fields passed as keyword
    arguments win over anything in options.

    Args:
        options: None, a plain mapping, or RequestOptions
        **fields: Request fields to set, keyed by wire name

    Returns:
        A new request dictionary
    """
    if options is None:
        request: Dict[str, Any] = {}
    elif isinstance(options, RequestOptions):
        request = options.to_request()
    else:
        request = dict(options)
    request.update(fields)
    return request
