"""
Review Service
"""

from typing import Any, Dict, List

from washlava.db.interface import DocumentCollection
from washlava.db.models import REVIEWER_NAME_FIELD


class ReviewService:
    """
    Service for the reviews collection.
    """

    def __init__(self, reviews: DocumentCollection):
        self.reviews = reviews

    async def create_review(self, review: Dict[str, Any]) -> Dict[str, Any]:
        return await self.reviews.insert_one(review)

    async def list_reviews(self) -> List[Dict[str, Any]]:
        return await self.reviews.find()

    async def list_by_reviewer(self, reviewer_name: str) -> List[Dict[str, Any]]:
        return await self.reviews.find({REVIEWER_NAME_FIELD: reviewer_name})
