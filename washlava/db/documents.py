"""
Document serialization and acknowledgement helpers.

MongoDB documents carry ``ObjectId`` values that JSON encoders do not
understand. Everything leaving the store layer goes through
``serialize_document`` first.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from bson import ObjectId


def serialize_value(value: Any) -> Any:
    """Recursively convert ObjectId and datetime values to strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: serialize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    return value


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return a JSON-ready copy of ``document`` (None passes through)."""
    if document is None:
        return None
    return serialize_value(document)


def insert_ack(inserted_id: Any, acknowledged: bool = True) -> Dict[str, Any]:
    return {"acknowledged": acknowledged, "insertedId": serialize_value(inserted_id)}


def update_ack(
    matched_count: int,
    modified_count: int,
    upserted_id: Any = None,
    acknowledged: bool = True,
) -> Dict[str, Any]:
    return {
        "acknowledged": acknowledged,
        "matchedCount": matched_count,
        "modifiedCount": modified_count,
        "upsertedId": serialize_value(upserted_id),
        "upsertedCount": 0 if upserted_id is None else 1,
    }


def delete_ack(deleted_count: int, acknowledged: bool = True) -> Dict[str, Any]:
    return {"acknowledged": acknowledged, "deletedCount": deleted_count}
