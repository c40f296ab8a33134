"""
MongoDB Store Adapter

This module implements the DocumentStore interface on top of pymongo's
asyncio client. All MongoDB-specific configuration and behavior is
encapsulated here.

Key characteristics:
- Stable API v1 in strict mode with deprecation errors enabled
- One client per process, created lazily in ``connect()``
- Every ``PyMongoError`` is re-raised as ``DatabaseError``
"""

import logging
from typing import Any, Dict, List, Optional

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from washlava.core.exceptions import DatabaseError
from washlava.db.documents import delete_ack, insert_ack, serialize_document, update_ack
from washlava.db.interface import Document, DocumentCollection, DocumentStore, Filter

logger = logging.getLogger(__name__)


class MongoCollection(DocumentCollection):
    """
    Collection handle backed by an ``AsyncCollection``.
    """

    def __init__(self, collection):
        self._collection = collection
        self.name = collection.name

    async def find(self, filter: Optional[Filter] = None) -> List[Document]:
        try:
            documents = await self._collection.find(filter or {}).to_list()
        except PyMongoError as e:
            raise DatabaseError(f"find on '{self.name}' failed", e) from e
        return [serialize_document(doc) for doc in documents]

    async def find_one(self, filter: Filter) -> Optional[Document]:
        try:
            document = await self._collection.find_one(filter)
        except PyMongoError as e:
            raise DatabaseError(f"find_one on '{self.name}' failed", e) from e
        return serialize_document(document)

    async def insert_one(self, document: Document) -> Dict[str, Any]:
        # insert_one adds _id to the dict it is given
        to_insert = dict(document)
        try:
            result = await self._collection.insert_one(to_insert)
        except PyMongoError as e:
            raise DatabaseError(f"insert_one on '{self.name}' failed", e) from e
        return insert_ack(result.inserted_id, result.acknowledged)

    async def update_one(self, filter: Filter, set_fields: Document) -> Dict[str, Any]:
        try:
            result = await self._collection.update_one(filter, {"$set": set_fields})
        except PyMongoError as e:
            raise DatabaseError(f"update_one on '{self.name}' failed", e) from e
        return update_ack(
            result.matched_count,
            result.modified_count,
            result.upserted_id,
            result.acknowledged,
        )

    async def delete_one(self, filter: Filter) -> Dict[str, Any]:
        try:
            result = await self._collection.delete_one(filter)
        except PyMongoError as e:
            raise DatabaseError(f"delete_one on '{self.name}' failed", e) from e
        return delete_ack(result.deleted_count, result.acknowledged)


class MongoStore(DocumentStore):
    """
    MongoDB implementation of DocumentStore.

    Args:
        uri: Connection string (mongodb:// or mongodb+srv://)
        database: Database name
        server_selection_timeout_ms: Driver server selection timeout
    """

    def __init__(self, uri: str, database: str, server_selection_timeout_ms: int = 5000):
        self.uri = uri
        self.database_name = database
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self._client: Optional[AsyncMongoClient] = None

    def _get_client(self) -> AsyncMongoClient:
        if self._client is None:
            self._client = AsyncMongoClient(
                self.uri,
                server_api=ServerApi("1", strict=True, deprecation_errors=True),
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
            )
        return self._client

    async def connect(self) -> None:
        try:
            await self._get_client().admin.command("ping")
        except PyMongoError as e:
            raise DatabaseError("could not connect to MongoDB", e) from e
        logger.info(f"Connected to MongoDB database '{self.database_name}'")

    async def ping(self) -> bool:
        try:
            await self._get_client().admin.command("ping")
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False
        return True

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")

    def collection(self, name: str) -> MongoCollection:
        return MongoCollection(self._get_client()[self.database_name][name])
