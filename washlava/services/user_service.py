"""
User Service

Registration, role lookup and admin-only mutations on the users
collection.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from washlava.core.exceptions import EmptyUpdateError, InvalidRoleError
from washlava.core.validators import parse_object_id
from washlava.db.interface import DocumentCollection
from washlava.db.models import BANNED_FIELD, EMAIL_FIELD, ID_FIELD, ROLE_FIELD, UserRole

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for the users collection.
    """

    def __init__(self, users: DocumentCollection):
        self.users = users

    async def list_users(self) -> List[Dict[str, Any]]:
        return await self.users.find()

    async def get_by_email(self, email: Optional[str]) -> Optional[Dict[str, Any]]:
        if email is None:
            return None
        return await self.users.find_one({EMAIL_FIELD: email})

    async def is_admin(self, email: Optional[str]) -> bool:
        """Return True if a user with ``email`` exists and has the admin role."""
        user = await self.get_by_email(email)
        return bool(user) and user.get(ROLE_FIELD) == UserRole.admin.value

    async def register(self, user: Dict[str, Any]) -> Tuple[bool, Dict[str, Any]]:
        """
        Insert ``user`` unless one with the same email already exists.

        Returns:
            ``(created, result)``. When the email is taken ``created`` is
            False and ``result`` is the ``insertedId: None`` sentinel.

        Note:
        - Check-then-insert is not atomic; two concurrent registrations can
          both insert. There is no unique index on email.
        """
        existing = await self.get_by_email(user.get(EMAIL_FIELD))
        if existing:
            return False, {"message": "User already exists", "insertedId": None}

        result = await self.users.insert_one(user)
        logger.info(f"Registered user {user.get(EMAIL_FIELD)!r} as {result['insertedId']}")
        return True, result

    async def update_user(
        self,
        user_id: str,
        role: Optional[str] = None,
        banned: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Set the role and/or banned flag of a user.

        Raises:
            InvalidObjectIdError: If user_id is malformed
            InvalidRoleError: If role is not member or admin
            EmptyUpdateError: If neither field is supplied
        """
        object_id = parse_object_id(user_id)

        fields: Dict[str, Any] = {}
        if role is not None:
            try:
                fields[ROLE_FIELD] = UserRole(role).value
            except ValueError:
                raise InvalidRoleError(role)
        if banned is not None:
            fields[BANNED_FIELD] = banned
        if not fields:
            raise EmptyUpdateError()

        result = await self.users.update_one({ID_FIELD: object_id}, fields)
        logger.info(f"Updated user {user_id}: {fields}")
        return result

    async def promote_to_admin(self, user_id: str) -> Dict[str, Any]:
        return await self.update_user(user_id, role=UserRole.admin.value)

    async def delete_user(self, user_id: str) -> Dict[str, Any]:
        object_id = parse_object_id(user_id)
        result = await self.users.delete_one({ID_FIELD: object_id})
        logger.info(f"Deleted user {user_id} (deletedCount={result['deletedCount']})")
        return result
