"""
Cart / order endpoints.

GET /carts serves both owners and admins from one handler: a caller whose
token email equals the ``email`` query parameter sees their own carts;
anyone else must be an admin, who sees the carts of ``email`` or, without
it, every cart.

POST and DELETE are open (no token required).
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from washlava.api.dependencies import forbidden, verify_admin, verify_token
from washlava.api.errors import http_error
from washlava.api.schemas import CartStatusUpdateRequest, DeleteResult, InsertResult, UpdateResult
from washlava.core.exceptions import WashlavaException
from washlava.db.context import AppContext, get_context
from washlava.db.models import EMAIL_FIELD
from washlava.services.cart_service import CartService
from washlava.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/carts", tags=["Carts"])


def get_cart_service(context: AppContext = Depends(get_context)) -> CartService:
    return CartService(
        context.carts,
        enforce_transitions=context.settings.ENFORCE_STATUS_TRANSITIONS,
    )


@router.get("", summary="List carts (own, or all for admins)")
async def list_carts(
    email: Optional[str] = Query(default=None),
    claims: Dict[str, Any] = Depends(verify_token),
    context: AppContext = Depends(get_context),
    carts: CartService = Depends(get_cart_service),
) -> List[Dict[str, Any]]:
    try:
        caller = claims.get(EMAIL_FIELD)
        if email is None or email != caller:
            if not await UserService(context.users).is_admin(caller):
                logger.warning(f"Cart listing for {email!r} denied to {caller!r}")
                raise forbidden()
        return await carts.list_carts(email)
    except WashlavaException as e:
        raise http_error(e)


@router.post(
    "",
    response_model=InsertResult,
    status_code=status.HTTP_201_CREATED,
    summary="Add an item to a cart"
)
async def create_cart(
    item: Dict[str, Any] = Body(...),
    carts: CartService = Depends(get_cart_service),
) -> Dict[str, Any]:
    try:
        return await carts.create_cart(item)
    except WashlavaException as e:
        raise http_error(e)


@router.patch(
    "/{cart_id}",
    response_model=UpdateResult,
    summary="Change the status of an order",
    dependencies=[Depends(verify_admin)]
)
async def update_cart_status(
    cart_id: str,
    body: CartStatusUpdateRequest,
    carts: CartService = Depends(get_cart_service),
) -> Dict[str, Any]:
    try:
        return await carts.update_status(cart_id, body.status)
    except WashlavaException as e:
        raise http_error(e)


@router.delete("/{cart_id}", response_model=DeleteResult, summary="Remove a cart item")
async def delete_cart(cart_id: str, carts: CartService = Depends(get_cart_service)) -> Dict[str, Any]:
    try:
        return await carts.delete_cart(cart_id)
    except WashlavaException as e:
        raise http_error(e)
