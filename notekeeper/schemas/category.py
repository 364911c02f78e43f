"""Category schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CategoryCreate(BaseModel):
    """Create a new category."""

    title: str = Field(..., min_length=3, max_length=64)


class CategoryUpdate(BaseModel):
    """Update a category."""

    title: str = Field(..., min_length=3, max_length=64)


class CategoryResponse(BaseModel):
    """Category response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    created_at: datetime
    updated_at: datetime
