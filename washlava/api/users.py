"""
User endpoints.

| Method | Path                 | Guards       |
|--------|----------------------|--------------|
| GET    | /users               | verify+admin |
| GET    | /users/admin/{email} | verify       |
| POST   | /users               | none         |
| PATCH  | /users/admin/{id}    | verify+admin |
| PATCH  | /users/{id}          | verify+admin |
| DELETE | /users/{id}          | verify+admin |
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from washlava.api.dependencies import forbidden, verify_admin, verify_token
from washlava.api.errors import http_error
from washlava.api.schemas import AdminStatusResponse, DeleteResult, UpdateResult, UserUpdateRequest
from washlava.core.exceptions import WashlavaException
from washlava.db.context import AppContext, get_context
from washlava.db.models import EMAIL_FIELD
from washlava.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", summary="List all users", dependencies=[Depends(verify_admin)])
async def list_users(context: AppContext = Depends(get_context)) -> List[Dict[str, Any]]:
    try:
        return await UserService(context.users).list_users()
    except WashlavaException as e:
        raise http_error(e)


@router.get(
    "/admin/{email}",
    response_model=AdminStatusResponse,
    summary="Check whether the caller is an admin",
    description="Callers may only query their own email"
)
async def check_admin(
    email: str,
    claims: Dict[str, Any] = Depends(verify_token),
    context: AppContext = Depends(get_context),
) -> AdminStatusResponse:
    if email != claims.get(EMAIL_FIELD):
        raise forbidden()
    try:
        admin = await UserService(context.users).is_admin(email)
    except WashlavaException as e:
        raise http_error(e)
    return AdminStatusResponse(admin=admin)


@router.post(
    "",
    summary="Register a user",
    description="Idempotent: an existing email returns insertedId null"
)
async def register_user(
    user: Dict[str, Any] = Body(...),
    context: AppContext = Depends(get_context),
) -> JSONResponse:
    try:
        created, result = await UserService(context.users).register(user)
    except WashlavaException as e:
        raise http_error(e)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        content=result,
    )


@router.patch(
    "/admin/{user_id}",
    response_model=UpdateResult,
    summary="Promote a user to admin",
    dependencies=[Depends(verify_admin)]
)
async def promote_user(user_id: str, context: AppContext = Depends(get_context)) -> Dict[str, Any]:
    try:
        return await UserService(context.users).promote_to_admin(user_id)
    except WashlavaException as e:
        raise http_error(e)


@router.patch(
    "/{user_id}",
    response_model=UpdateResult,
    summary="Set a user's role and/or banned flag",
    dependencies=[Depends(verify_admin)]
)
async def update_user(
    user_id: str,
    body: UserUpdateRequest,
    context: AppContext = Depends(get_context),
) -> Dict[str, Any]:
    try:
        return await UserService(context.users).update_user(user_id, role=body.role, banned=body.banned)
    except WashlavaException as e:
        raise http_error(e)


@router.delete(
    "/{user_id}",
    response_model=DeleteResult,
    summary="Delete a user",
    dependencies=[Depends(verify_admin)]
)
async def delete_user(user_id: str, context: AppContext = Depends(get_context)) -> Dict[str, Any]:
    try:
        return await UserService(context.users).delete_user(user_id)
    except WashlavaException as e:
        raise http_error(e)
