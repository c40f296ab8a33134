"""
Authentication and authorization guards.

``verify_token`` and ``verify_admin`` are FastAPI dependencies. Routes
declare them to build their guard chain; a failing guard raises before
the handler body runs.

    request -> verify_token -> verify_admin -> handler
"""

import logging
from typing import Any, Dict

import jwt
from fastapi import Depends, HTTPException, Request, status

from washlava.api.errors import http_error
from washlava.core.exceptions import DatabaseError
from washlava.core.security import decode_token, extract_bearer_token
from washlava.db.context import AppContext, get_context
from washlava.db.models import EMAIL_FIELD
from washlava.services.user_service import UserService

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "Unauthorized access"
FORBIDDEN_MESSAGE = "Forbidden access"


def unauthorized() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED_MESSAGE)


def forbidden() -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN_MESSAGE)


async def verify_token(
    request: Request,
    context: AppContext = Depends(get_context),
) -> Dict[str, Any]:
    """
    Verify the bearer token and return its claims.

    The header is split on whitespace and the second part is taken as the
    token; the scheme word is not checked. Claims are also stored on
    ``request.state.decoded``.

    Raises:
        HTTPException 401: Header missing, token malformed, bad signature
            or expired
    """
    authorization = request.headers.get("Authorization")
    if not authorization:
        raise unauthorized()

    token = extract_bearer_token(authorization)
    if not token:
        logger.warning(f"Malformed Authorization header on {request.method} {request.url.path}")
        raise unauthorized()

    try:
        claims = decode_token(token, context.settings)
    except jwt.InvalidTokenError as e:
        logger.warning(f"Token rejected on {request.method} {request.url.path}: {type(e).__name__}")
        raise unauthorized()

    request.state.decoded = claims
    return claims


async def verify_admin(
    claims: Dict[str, Any] = Depends(verify_token),
    context: AppContext = Depends(get_context),
) -> Dict[str, Any]:
    """
    Require the verified caller to be an admin user.

    Looks up the user by the token's email on every call.

    Raises:
        HTTPException 403: No such user, or role is not admin
        HTTPException 500: Store fault during the lookup
    """
    try:
        admin = await UserService(context.users).is_admin(claims.get(EMAIL_FIELD))
    except DatabaseError as e:
        raise http_error(e)

    if not admin:
        logger.warning(f"Admin access denied for {claims.get(EMAIL_FIELD)!r}")
        raise forbidden()
    return claims
