"""User management schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from notekeeper.models.enums import UserRole


class UserCreate(BaseModel):
    """Register a new user (admin only)."""

    email: EmailStr = Field(..., max_length=180)
    password: str = Field(..., min_length=8, max_length=128)


class UserUpdate(BaseModel):
    """Update a user's email, roles or password."""

    email: EmailStr | None = Field(None, max_length=180)
    roles: list[UserRole] | None = None
    password: str | None = Field(None, min_length=8, max_length=128)


class UserDetail(BaseModel):
    """User as shown to administrators."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    roles: list[str]
    created_at: datetime
    updated_at: datetime
