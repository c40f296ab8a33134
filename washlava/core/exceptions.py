"""
Custom Exceptions

Domain errors raised by the service layer. Endpoints translate them to
HTTP status codes:

- 400: InvalidObjectIdError, InvalidStatusError, InvalidRoleError,
  EmptyUpdateError, IllegalStatusTransitionError
- 404: DocumentNotFoundError
- 500: DatabaseError (driver detail is logged, never returned)
"""

from typing import Optional


class WashlavaException(Exception):
    """Base exception for the Washlava service."""
    pass


class InvalidObjectIdError(WashlavaException):
    """Raised when a path identifier is not a well-formed ObjectId."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid id: '{value}'")


class InvalidStatusError(WashlavaException):
    """Raised when a cart status is outside the allowed set."""

    def __init__(self, status: object):
        self.status = status
        super().__init__(f"Invalid status: '{status}'")


class InvalidRoleError(WashlavaException):
    """Raised when a user role is outside the allowed set."""

    def __init__(self, role: object):
        self.role = role
        super().__init__(f"Invalid role: '{role}'")


class EmptyUpdateError(WashlavaException):
    """Raised when a PATCH carries no field to set."""

    def __init__(self):
        super().__init__("No fields to update")


class IllegalStatusTransitionError(WashlavaException):
    """Raised when transition enforcement is on and the move is not allowed."""

    def __init__(self, current: str, new: str):
        self.current = current
        self.new = new
        super().__init__(f"Cannot change status from '{current}' to '{new}'")


class DocumentNotFoundError(WashlavaException):
    """Raised when an id-targeted mutation matches no document."""

    def __init__(self, collection: str, document_id: str):
        self.collection = collection
        self.document_id = document_id
        super().__init__(f"No document in '{collection}' with id '{document_id}'")


class DatabaseError(WashlavaException):
    """Raised when store operations fail."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(f"Database error: {message}")
