"""Request signing for GDAX private endpoints.

Every private request carries an HMAC-SHA256 signature over the prehash
string ``timestamp + METHOD + path + body``, keyed with the base64-decoded
API secret. The server recomputes the digest from the headers it receives,
so the timestamp and body must be rendered exactly as they are sent.
"""

import base64
import binascii
import json
import time
from typing import Optional, Union

from cryptography.hazmat.primitives import hashes, hmac

from .types import Body, InvalidCredentialFormat, Signature


def decode_secret(private_key: str) -> bytes:
    """Decode a base64 API secret into raw key bytes."""
    try:
        return base64.b64decode(private_key, validate=True)
    except (binascii.Error, TypeError, ValueError) as exc:
        raise InvalidCredentialFormat("API secret is not valid base64") from exc


def format_timestamp(timestamp: Union[int, float]) -> str:
    """Render a timestamp the way it appears in the prehash and the header."""
    return str(timestamp)


def serialize_body(body: Body) -> str:
    """Serialize a request body as compact JSON, preserving key order."""
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


def build_prehash(
    timestamp: Union[int, float],
    method: str,
    path: str,
    body: Optional[Body] = None,
) -> str:
    """Build the string that gets signed.

    A missing body contributes nothing; an empty mapping contributes ``{}``.
    """
    prehash = f"{format_timestamp(timestamp)}{method.upper()}{path}"
    if body is not None:
        prehash += serialize_body(body)
    return prehash


def sign_message(
    private_key: str,
    path: str,
    method: str,
    body: Optional[Body] = None,
    timestamp: Optional[Union[int, float]] = None,
) -> Signature:
    """Sign a request.

    Args:
        private_key: Base64-encoded API secret
        path: Request path, including the query string if any
        method: HTTP method
        body: JSON body for requests that carry one (optional)
        timestamp: Seconds since epoch; defaults to the current time

    Returns:
        Signature with the base64 digest and the timestamp that was signed.

    Raises:
        InvalidCredentialFormat: If the secret is not valid base64.
    """
    key = decode_secret(private_key)

    if timestamp is None:
        timestamp = time.time()

    prehash = build_prehash(timestamp, method, path, body)

    mac = hmac.HMAC(key, hashes.SHA256())
    mac.update(prehash.encode("utf-8"))
    digest = base64.b64encode(mac.finalize()).decode()

    return Signature(digest=digest, timestamp=timestamp)
