"""Note schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Create a new note."""

    title: str = Field(..., min_length=3, max_length=255)
    content: str = Field(..., min_length=1)
    category_id: int = Field(..., ge=1)


class NoteUpdate(BaseModel):
    """Update a note."""

    title: str | None = Field(None, min_length=3, max_length=255)
    content: str | None = Field(None, min_length=1)
    category_id: int | None = Field(None, ge=1)


class NoteResponse(BaseModel):
    """Note response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    author_id: int
    category_id: int
    created_at: datetime
    updated_at: datetime
