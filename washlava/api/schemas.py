"""
API Request and Response Schemas

Documents themselves are schemaless and pass through as plain dicts;
these models cover the fixed-shape bodies.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenResponse(BaseModel):
    """Response model for token issuance."""
    token: str = Field(..., description="Signed identity token, valid for one hour")


class AdminStatusResponse(BaseModel):
    """Response model for the admin check."""
    admin: bool


class UserUpdateRequest(BaseModel):
    """Body of PATCH /users/{id}."""
    role: Optional[str] = Field(default=None, description="member or admin")
    banned: Optional[bool] = None


class CartStatusUpdateRequest(BaseModel):
    """Body of PATCH /carts/{id}."""
    status: str = Field(..., description="pending, processing, completed or cancelled")


class InsertResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    inserted_id: Optional[str] = Field(default=None, alias="insertedId")


class UpdateResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    matched_count: int = Field(alias="matchedCount")
    modified_count: int = Field(alias="modifiedCount")
    upserted_id: Optional[str] = Field(default=None, alias="upsertedId")
    upserted_count: int = Field(default=0, alias="upsertedCount")


class DeleteResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    deleted_count: int = Field(alias="deletedCount")
