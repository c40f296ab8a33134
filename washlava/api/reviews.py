"""
Review endpoints.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from washlava.api.dependencies import verify_admin
from washlava.api.errors import http_error
from washlava.api.schemas import InsertResult
from washlava.core.exceptions import WashlavaException
from washlava.db.context import AppContext, get_context
from washlava.services.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.post(
    "",
    response_model=InsertResult,
    status_code=status.HTTP_201_CREATED,
    summary="Post a review"
)
async def create_review(
    review: Dict[str, Any] = Body(...),
    context: AppContext = Depends(get_context),
) -> Dict[str, Any]:
    try:
        return await ReviewService(context.reviews).create_review(review)
    except WashlavaException as e:
        raise http_error(e)


@router.get("", summary="List all reviews", dependencies=[Depends(verify_admin)])
async def list_reviews(context: AppContext = Depends(get_context)) -> List[Dict[str, Any]]:
    try:
        return await ReviewService(context.reviews).list_reviews()
    except WashlavaException as e:
        raise http_error(e)


@router.get("/{reviewer_name}", summary="List reviews by reviewer name")
async def list_reviews_by_reviewer(
    reviewer_name: str,
    context: AppContext = Depends(get_context),
) -> List[Dict[str, Any]]:
    try:
        return await ReviewService(context.reviews).list_by_reviewer(reviewer_name)
    except WashlavaException as e:
        raise http_error(e)
