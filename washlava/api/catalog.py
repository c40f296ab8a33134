"""
Laundry service catalog endpoints.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from washlava.api.dependencies import verify_admin
from washlava.api.errors import http_error
from washlava.api.schemas import DeleteResult, UpdateResult
from washlava.core.exceptions import WashlavaException
from washlava.db.context import AppContext, get_context
from washlava.services.catalog_service import CatalogService

router = APIRouter(prefix="/services", tags=["Services"])


@router.get("", summary="List all laundry services")
async def list_services(context: AppContext = Depends(get_context)) -> List[Dict[str, Any]]:
    try:
        return await CatalogService(context.services).list_services()
    except WashlavaException as e:
        raise http_error(e)


@router.patch(
    "/{service_id}",
    response_model=UpdateResult,
    summary="Update fields of a laundry service",
    dependencies=[Depends(verify_admin)]
)
async def update_service(
    service_id: str,
    fields: Dict[str, Any] = Body(...),
    context: AppContext = Depends(get_context),
) -> Dict[str, Any]:
    try:
        return await CatalogService(context.services).update_service(service_id, fields)
    except WashlavaException as e:
        raise http_error(e)


@router.delete(
    "/{service_id}",
    response_model=DeleteResult,
    summary="Delete a laundry service",
    dependencies=[Depends(verify_admin)]
)
async def delete_service(service_id: str, context: AppContext = Depends(get_context)) -> Dict[str, Any]:
    try:
        return await CatalogService(context.services).delete_service(service_id)
    except WashlavaException as e:
        raise http_error(e)
