"""
Identity Token Helpers

Issues and verifies the signed, time-limited tokens handed out by
``POST /jwt``. Tokens are stateless: nothing is stored server-side, so
there is no refresh or revocation.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from washlava.core.setting import Settings


def issue_token(payload: Dict[str, Any], settings: Settings) -> str:
    """
    Sign a token carrying the client-supplied claims.

    The payload shape is not validated. ``iat`` and ``exp`` are always set
    by the server, overriding any client values.

    Args:
        payload: Claims to embed (typically ``{"email": ...}``)
        settings: Application settings holding the secret and lifetime

    Returns:
        Encoded JWT string
    """
    now = datetime.now(timezone.utc)
    claims = dict(payload)
    claims["iat"] = now
    claims["exp"] = now + timedelta(seconds=settings.ACCESS_TOKEN_EXPIRE_SECONDS)
    return jwt.encode(claims, settings.ACCESS_TOKEN_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str, settings: Settings) -> Dict[str, Any]:
    """
    Verify signature and expiry and return the decoded claims.

    Raises:
        jwt.InvalidTokenError: On bad signature, expiry or malformed input
    """
    return jwt.decode(
        token,
        settings.ACCESS_TOKEN_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        # payload is client-chosen: aud, sub and jti are not validated
        options={
            "require": ["exp"],
            "verify_aud": False,
            "verify_sub": False,
            "verify_jti": False,
        },
    )


def extract_bearer_token(authorization: str) -> str:
    """
    Return the second whitespace-separated part of an Authorization header.

    The scheme literal is not checked. Returns an empty string when the
    header has no second part.
    """
    parts = authorization.split()
    if len(parts) < 2:
        return ""
    return parts[1]
