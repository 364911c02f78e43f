"""Task schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    """Create a new task."""

    title: str = Field(..., min_length=3, max_length=255)
    category_id: int = Field(..., ge=1)


class TaskUpdate(BaseModel):
    """Update a task."""

    title: str | None = Field(None, min_length=3, max_length=255)
    category_id: int | None = Field(None, ge=1)


class TaskResponse(BaseModel):
    """Task response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author_id: int
    category_id: int
    created_at: datetime
    updated_at: datetime
