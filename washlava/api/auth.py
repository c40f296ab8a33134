"""
Token issuance endpoint.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from washlava.api.schemas import TokenResponse
from washlava.core.security import issue_token
from washlava.db.context import AppContext, get_context

router = APIRouter(tags=["Auth"])


@router.post(
    "/jwt",
    response_model=TokenResponse,
    summary="Issue an identity token",
    description="Signs the posted claims into a token valid for one hour"
)
async def create_token(
    payload: Dict[str, Any] = Body(...),
    context: AppContext = Depends(get_context),
) -> TokenResponse:
    return TokenResponse(token=issue_token(payload, context.settings))
