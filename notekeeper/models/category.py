"""Category model."""

import re
import unicodedata

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from notekeeper.database import Base
from notekeeper.models.mixins import TimestampMixin


def slugify(value: str) -> str:
    """Turn a title into a lowercase, dash-separated ASCII slug."""
    value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    value = re.sub(r"[^\w\s-]", "", value.lower())
    return re.sub(r"[-\s_]+", "-", value).strip("-")


class Category(Base, TimestampMixin):
    """Category shared by all users for filing notes and tasks."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(64), nullable=False)
    slug = Column(String(64), nullable=False, unique=True, index=True)

    # Relationships
    notes = relationship("Note", back_populates="category", passive_deletes="all")
    tasks = relationship("Task", back_populates="category", passive_deletes="all")
