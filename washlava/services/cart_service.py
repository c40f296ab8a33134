"""
Cart Service

Cart items double as orders: each carries its owner's email and a status
from ``CartStatus``.
"""

import logging
from typing import Any, Dict, List, Optional

from washlava.core.exceptions import DocumentNotFoundError, IllegalStatusTransitionError
from washlava.core.validators import parse_object_id
from washlava.db.interface import DocumentCollection
from washlava.db.models import EMAIL_FIELD, ID_FIELD, STATUS_FIELD
from washlava.services.cart_status import DEFAULT_STATUS, allowed_predecessors, parse_status

logger = logging.getLogger(__name__)


class CartService:
    """
    Service for the carts collection.

    Args:
        carts: Collection handle
        enforce_transitions: Reject status updates outside the lifecycle
    """

    def __init__(self, carts: DocumentCollection, enforce_transitions: bool = False):
        self.carts = carts
        self.enforce_transitions = enforce_transitions

    async def list_carts(self, email: Optional[str] = None) -> List[Dict[str, Any]]:
        """Return carts owned by ``email``, or every cart when email is None."""
        if email is None:
            return await self.carts.find()
        return await self.carts.find({EMAIL_FIELD: email})

    async def create_cart(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a cart item, defaulting its status to ``pending``.

        Raises:
            InvalidStatusError: If an explicit status is not enumerated
        """
        document = dict(item)
        if document.get(STATUS_FIELD) is None:
            document[STATUS_FIELD] = DEFAULT_STATUS.value
        else:
            document[STATUS_FIELD] = parse_status(document[STATUS_FIELD]).value
        return await self.carts.insert_one(document)

    async def update_status(self, cart_id: str, status: object) -> Dict[str, Any]:
        """
        Change the status of one cart.

        Raises:
            InvalidObjectIdError: If cart_id is malformed
            InvalidStatusError: If status is not enumerated
            IllegalStatusTransitionError: If enforcement is on and the move
                is not allowed
            DocumentNotFoundError: If no cart has this id
        """
        object_id = parse_object_id(cart_id)
        new_status = parse_status(status)

        filter: Dict[str, Any] = {ID_FIELD: object_id}
        if self.enforce_transitions:
            filter[STATUS_FIELD] = {"$in": allowed_predecessors(new_status)}

        result = await self.carts.update_one(filter, {STATUS_FIELD: new_status.value})
        if result["matchedCount"] == 0:
            if not self.enforce_transitions:
                raise DocumentNotFoundError(self.carts.name, cart_id)
            current = await self.carts.find_one({ID_FIELD: object_id})
            if current is None:
                raise DocumentNotFoundError(self.carts.name, cart_id)
            current_status = current.get(STATUS_FIELD) or DEFAULT_STATUS.value
            raise IllegalStatusTransitionError(current_status, new_status.value)

        logger.info(f"Cart {cart_id} status set to {new_status.value}")
        return result

    async def delete_cart(self, cart_id: str) -> Dict[str, Any]:
        """
        Delete one cart.

        Raises:
            InvalidObjectIdError: If cart_id is malformed
            DocumentNotFoundError: If no cart has this id
        """
        object_id = parse_object_id(cart_id)
        result = await self.carts.delete_one({ID_FIELD: object_id})
        if result["deletedCount"] == 0:
            raise DocumentNotFoundError(self.carts.name, cart_id)
        return result
