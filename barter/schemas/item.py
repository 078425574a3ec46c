"""Item schemas."""

from pydantic import BaseModel, Field


class ItemCreate(BaseModel):
    """List a new item."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    category: str = Field(..., max_length=50)
    image_keys: list[str] | None = None


class ItemUpdate(BaseModel):
    """Update an item.

    Omitting image_keys keeps the current images; any list (even empty)
    replaces them.
    """

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    category: str = Field(..., max_length=50)
    image_keys: list[str] | None = None


class ItemResponse(BaseModel):
    """Display snapshot of an item."""

    id: str
    owner_id: str
    name: str
    description: str | None
    category: str
    image_keys: list[str]
