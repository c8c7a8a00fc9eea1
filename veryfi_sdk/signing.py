"""
Request signing.

The API recomputes the signature from the request arguments and the
X-Veryfi-Request-Timestamp header, so the payload string must be built
exactly the same way on every call.
"""

import base64
import hashlib
import hmac
import time
from collections.abc import Mapping
from urllib.parse import quote

# Characters left untouched by JavaScript's encodeURI
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


def get_timestamp() -> int:
    """Unix timestamp in milliseconds."""
    return int(time.time() * 1000)


def encode_uri(value: str) -> str:
    return quote(value, safe=_URI_SAFE)


def build_payload(payload_params: Mapping, timestamp: int) -> str:
    payload = f"timestamp:{timestamp}"
    for key, value in payload_params.items():
        payload = f"{payload},{key}:{value}"
    return payload


def generate_signature(client_secret: str, payload_params: Mapping, timestamp: int) -> str:
    """
    Generate a unique signature for the payload params.

    Args:
        client_secret: Shared secret issued with the client id
        payload_params: Arguments sent in the request body, in the order they are sent
        timestamp: Unix timestamp in milliseconds, sent alongside the signature

    Returns:
        Base64 encoded HMAC-SHA256 of the payload string
    """
    secret_bytes = encode_uri(client_secret).encode("utf-8")
    payload_bytes = encode_uri(build_payload(payload_params, timestamp)).encode("utf-8")
    digest = hmac.new(secret_bytes, msg=payload_bytes, digestmod=hashlib.sha256).digest()
    return base64.b64encode(digest).decode("utf-8").strip()
