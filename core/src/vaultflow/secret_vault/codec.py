"""JSON codec for secret payloads.

Secret values travel to the remote store as a single ``SecretString``.
Decoding errors are not caught here; a malformed stored payload surfaces
to the caller as ``json.JSONDecodeError``.
"""

import json
from typing import Any


def encode_value(value: Any) -> str:
    return json.dumps(value)


def decode_value(payload: str) -> Any:
    return json.loads(payload)
