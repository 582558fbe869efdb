"""
Session Token codec — signing and parsing of the stateless session cookie.

Wire format::

    <base64(json payload)>.<base64url(HMAC-SHA256(payload))>

The payload is ``{"ok": true, "at": <issued epoch millis>}``. The token is
the entire session state; nothing is stored server-side.

Security Note:
    The signing key is the secret truncated or '0'-padded to 32 characters.
    This keeps previously issued cookies valid and must not change without
    invalidating every live session.
"""
import hmac
import base64
import hashlib
import binascii
from typing import Optional

import orjson
from pydantic import BaseModel, ValidationError

SESSION_COOKIE = "arm_session"
SESSION_MAX_AGE = 60 * 60 * 24 * 7  # 7 days, in seconds
KEY_LENGTH = 32
_SEPARATOR = "."


class SessionPayload(BaseModel):
    """Decoded session token body."""

    ok: bool
    at: int  # issued-at, epoch milliseconds

    model_config = {"strict": True, "frozen": True}


def signing_key(secret: str) -> bytes:
    """Return the HMAC key: first 32 characters of secret, '0'-padded."""
    return secret[:KEY_LENGTH].ljust(KEY_LENGTH, "0").encode("utf-8")


def sign(value: str, secret: str) -> str:
    """HMAC-SHA256 of value, encoded as unpadded base64url."""
    digest = hmac.new(
        signing_key(secret), value.encode("utf-8"), hashlib.sha256
    ).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


def encode_token(payload: SessionPayload, secret: str) -> str:
    """Serialize and sign a payload into a cookie value."""
    body = orjson.dumps(payload.model_dump())
    value = base64.b64encode(body).decode("ascii")
    return f"{value}{_SEPARATOR}{sign(value, secret)}"


def decode_token(token: str, secret: str) -> Optional[SessionPayload]:
    """Verify and parse a cookie value.

    Args:
        token: Raw cookie value.
        secret: Secret the token must be signed with.

    Returns:
        The payload, or None if the token is malformed, unsigned,
        signed with another secret, or carries an invalid body.
    """
    value, _, signature = token.partition(_SEPARATOR)
    if not value or not signature:
        return None
    expected = sign(value, secret).encode("ascii")
    if not hmac.compare_digest(expected, signature.encode("utf-8", "replace")):
        return None
    try:
        body = base64.b64decode(value, validate=True)
        return SessionPayload.model_validate(orjson.loads(body))
    except (binascii.Error, orjson.JSONDecodeError, ValidationError):
        return None
