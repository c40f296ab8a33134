"""
Database module with abstraction layer.

This module provides:
- DocumentStore / DocumentCollection: abstract store interface
- MongoStore: MongoDB implementation (default)
- AppContext: settings plus collection handles, built once per app
"""

from washlava.db.interface import DocumentCollection, DocumentStore
from washlava.db.mongo_adapter import MongoStore
from washlava.db.context import AppContext, get_context

__all__ = [
    "DocumentCollection",
    "DocumentStore",
    "MongoStore",
    "AppContext",
    "get_context",
]
