"""
Service-layer tests run directly against the in-memory collections.
"""

import pytest
from bson import ObjectId

from washlava.core.exceptions import (
    DocumentNotFoundError,
    EmptyUpdateError,
    IllegalStatusTransitionError,
    InvalidObjectIdError,
    InvalidRoleError,
    InvalidStatusError,
)
from washlava.services.cart_service import CartService
from washlava.services.catalog_service import CatalogService
from washlava.services.review_service import ReviewService
from washlava.services.user_service import UserService
from tests.fakes import InMemoryCollection


@pytest.fixture
def collection():
    return InMemoryCollection("test")


class TestUserService:
    async def test_register_is_idempotent(self, collection):
        service = UserService(collection)
        created, first = await service.register({"email": "a@x.com"})
        assert created
        created, second = await service.register({"email": "a@x.com"})
        assert not created
        assert second["insertedId"] is None
        assert len(collection.documents) == 1

    async def test_is_admin(self, collection):
        collection.seed({"email": "a@x.com", "role": "admin"})
        collection.seed({"email": "b@x.com"})
        service = UserService(collection)
        assert await service.is_admin("a@x.com")
        assert not await service.is_admin("b@x.com")
        assert not await service.is_admin("c@x.com")
        assert not await service.is_admin(None)

    async def test_update_validations(self, collection):
        service = UserService(collection)
        user_id = collection.seed({"email": "a@x.com"})
        with pytest.raises(InvalidObjectIdError):
            await service.update_user("bad", role="admin")
        with pytest.raises(InvalidRoleError):
            await service.update_user(user_id, role="root")
        with pytest.raises(EmptyUpdateError):
            await service.update_user(user_id)
        assert collection.mutations == []


class TestCatalogService:
    async def test_update_strips_id(self, collection):
        service_id = collection.seed({"name": "Wash"})
        with pytest.raises(EmptyUpdateError):
            await CatalogService(collection).update_service(service_id, {"_id": "x"})


class TestCartService:
    async def test_list_filters_by_owner(self, collection):
        collection.seed({"email": "a@x.com"})
        collection.seed({"email": "b@x.com"})
        service = CartService(collection)
        assert len(await service.list_carts("a@x.com")) == 1
        assert len(await service.list_carts()) == 2

    async def test_update_rejects_bogus_status_before_store(self, collection):
        cart_id = collection.seed({"email": "a@x.com", "status": "pending"})
        with pytest.raises(InvalidStatusError):
            await CartService(collection).update_status(cart_id, "bogus")
        assert collection.calls == []

    async def test_update_unknown_id(self, collection):
        with pytest.raises(DocumentNotFoundError):
            await CartService(collection).update_status(str(ObjectId()), "completed")

    async def test_enforced_transition(self, collection):
        cart_id = collection.seed({"email": "a@x.com", "status": "cancelled"})
        service = CartService(collection, enforce_transitions=True)
        with pytest.raises(IllegalStatusTransitionError):
            await service.update_status(cart_id, "processing")

    async def test_enforced_transition_missing_status_counts_as_pending(self, collection):
        cart_id = collection.seed({"email": "a@x.com"})
        service = CartService(collection, enforce_transitions=True)
        result = await service.update_status(cart_id, "processing")
        assert result["modifiedCount"] == 1

    async def test_enforced_transition_checked_in_the_write(self):
        class ConcurrentCancel(InMemoryCollection):
            """Another request cancels the cart just before our write lands."""

            async def update_one(self, filter, set_fields):
                self.documents[0]["status"] = "cancelled"
                return await super().update_one(filter, set_fields)

        carts = ConcurrentCancel("carts")
        cart_id = carts.seed({"email": "a@x.com", "status": "processing"})
        service = CartService(carts, enforce_transitions=True)
        with pytest.raises(IllegalStatusTransitionError):
            await service.update_status(cart_id, "completed")
        assert carts.get(cart_id)["status"] == "cancelled"
        assert carts.calls == ["update_one", "find_one"]

    async def test_enforced_transition_unknown_status_blocked(self, collection):
        cart_id = collection.seed({"email": "a@x.com", "status": "lost"})
        with pytest.raises(IllegalStatusTransitionError):
            await CartService(collection, enforce_transitions=True).update_status(cart_id, "pending")
        assert collection.get(cart_id)["status"] == "lost"

    async def test_delete_unknown_id(self, collection):
        with pytest.raises(DocumentNotFoundError):
            await CartService(collection).delete_cart(str(ObjectId()))


class TestReviewService:
    async def test_list_by_reviewer(self, collection):
        service = ReviewService(collection)
        await service.create_review({"reviewerName": "Ann"})
        await service.create_review({"reviewerName": "Bob"})
        assert [r["reviewerName"] for r in await service.list_by_reviewer("Ann")] == ["Ann"]
