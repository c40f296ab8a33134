"""
Application Context

Holds the store connection and the four collection handles. One context
is built by ``create_app`` and stored on ``app.state``; handlers receive
it through the ``get_context`` dependency.
"""

from dataclasses import dataclass

from fastapi import Request

from washlava.core.setting import Settings
from washlava.db.interface import DocumentCollection, DocumentStore


@dataclass
class AppContext:
    settings: Settings
    store: DocumentStore
    users: DocumentCollection
    services: DocumentCollection
    carts: DocumentCollection
    reviews: DocumentCollection

    @classmethod
    def build(cls, settings: Settings, store: DocumentStore) -> "AppContext":
        return cls(
            settings=settings,
            store=store,
            users=store.collection(settings.USERS_COLLECTION),
            services=store.collection(settings.SERVICES_COLLECTION),
            carts=store.collection(settings.CARTS_COLLECTION),
            reviews=store.collection(settings.REVIEWS_COLLECTION),
        )


def get_context(request: Request) -> AppContext:
    """FastAPI dependency returning the context of the running app."""
    return request.app.state.context
