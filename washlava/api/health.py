"""
Liveness and health endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from washlava.db.context import AppContext, get_context

router = APIRouter(tags=["Health"])


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Washlava is running"


@router.get("/health")
async def health_check(context: AppContext = Depends(get_context)):
    """
    Health check endpoint for monitoring.

    Returns 503 when the document store does not answer a ping.
    """
    if not await context.store.ping():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unavailable"
        )
    return {"status": "healthy"}
