"""
Input Validators

Identifier and enumerated-value checks run before any store call.
"""

from bson import ObjectId

from washlava.core.exceptions import InvalidObjectIdError


def parse_object_id(value: str) -> ObjectId:
    """
    Convert a path identifier to an ObjectId.

    Args:
        value: The raw identifier from the URL path

    Returns:
        The parsed ObjectId

    Raises:
        InvalidObjectIdError: If the value is not 24 hex characters
    """
    if not is_valid_object_id(value):
        raise InvalidObjectIdError(value)
    return ObjectId(value)


def is_valid_object_id(value: str) -> bool:
    """Return True if ``value`` parses as an ObjectId."""
    return isinstance(value, str) and ObjectId.is_valid(value)
