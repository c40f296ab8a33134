"""
Document Store Abstraction Interface

This module defines the store abstraction that handlers and services talk
to. The interface covers the handful of filter-based operations the API
needs, so the MongoDB driver stays behind one adapter and tests can swap
in an in-memory store.

Contract for implementations:
- Returned documents are JSON-ready (see ``serialize_document``)
- Mutations return driver-style acknowledgement dicts
  (see ``insert_ack``, ``update_ack``, ``delete_ack``)
- Driver failures are raised as ``DatabaseError``
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Document = Dict[str, Any]
Filter = Dict[str, Any]


class DocumentCollection(ABC):
    """
    Abstract base class for a single collection handle.
    """

    name: str

    @abstractmethod
    async def find(self, filter: Optional[Filter] = None) -> List[Document]:
        """
        Return every document matching ``filter`` (all when None).
        """
        pass

    @abstractmethod
    async def find_one(self, filter: Filter) -> Optional[Document]:
        """
        Return the first document matching ``filter``, or None.
        """
        pass

    @abstractmethod
    async def insert_one(self, document: Document) -> Dict[str, Any]:
        """
        Insert a document and return ``{"acknowledged", "insertedId"}``.

        The caller's dict is not modified.
        """
        pass

    @abstractmethod
    async def update_one(self, filter: Filter, set_fields: Document) -> Dict[str, Any]:
        """
        Apply ``$set`` with ``set_fields`` to the first match.

        Returns:
            ``{"acknowledged", "matchedCount", "modifiedCount",
            "upsertedId", "upsertedCount"}``
        """
        pass

    @abstractmethod
    async def delete_one(self, filter: Filter) -> Dict[str, Any]:
        """
        Delete the first match and return ``{"acknowledged", "deletedCount"}``.
        """
        pass


class DocumentStore(ABC):
    """
    Abstract base class for a document database connection.

    To add a new backend:
    1. Subclass DocumentStore and DocumentCollection
    2. Implement all abstract methods
    3. Pass an instance to ``create_app(store=...)``
    """

    @abstractmethod
    async def connect(self) -> None:
        """
        Establish the connection and verify the server is reachable.

        Raises:
            DatabaseError: If the server cannot be reached
        """
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """
        Return True if the server answers a ping.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """
        Release the connection. Safe to call more than once.
        """
        pass

    @abstractmethod
    def collection(self, name: str) -> DocumentCollection:
        """
        Return a handle for the named collection.
        """
        pass
