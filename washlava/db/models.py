"""
Document shapes stored by the service.

Documents are schemaless; these enums and field names are the parts the
handlers rely on.

- users:    email (lookup key), role (member | admin, absent = member), banned
- services: opaque fields
- carts:    email (owner), status (see services.cart_status), item fields
- reviews:  reviewerName, free-form content
"""

from enum import Enum

EMAIL_FIELD = "email"
ROLE_FIELD = "role"
BANNED_FIELD = "banned"
STATUS_FIELD = "status"
REVIEWER_NAME_FIELD = "reviewerName"
ID_FIELD = "_id"


class UserRole(str, Enum):
    member = "member"
    admin = "admin"
