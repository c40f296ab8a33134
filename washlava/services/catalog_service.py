"""
Service Catalog Service

Laundry services offered on the marketplace. Services are created out of
band; the API only lists, updates and deletes them.
"""

import logging
from typing import Any, Dict, List

from washlava.core.exceptions import EmptyUpdateError
from washlava.core.validators import parse_object_id
from washlava.db.interface import DocumentCollection
from washlava.db.models import ID_FIELD

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Service for the services collection.
    """

    def __init__(self, services: DocumentCollection):
        self.services = services

    async def list_services(self) -> List[Dict[str, Any]]:
        return await self.services.find()

    async def update_service(self, service_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Set arbitrary fields on a service. ``_id`` in ``fields`` is ignored.

        Raises:
            InvalidObjectIdError: If service_id is malformed
            EmptyUpdateError: If there is nothing left to set
        """
        object_id = parse_object_id(service_id)
        to_set = {key: value for key, value in fields.items() if key != ID_FIELD}
        if not to_set:
            raise EmptyUpdateError()

        result = await self.services.update_one({ID_FIELD: object_id}, to_set)
        logger.info(f"Updated service {service_id}: {sorted(to_set)}")
        return result

    async def delete_service(self, service_id: str) -> Dict[str, Any]:
        object_id = parse_object_id(service_id)
        result = await self.services.delete_one({ID_FIELD: object_id})
        logger.info(f"Deleted service {service_id} (deletedCount={result['deletedCount']})")
        return result
