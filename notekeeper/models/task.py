"""Task model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from notekeeper.database import Base
from notekeeper.models.mixins import TimestampMixin


class Task(Base, TimestampMixin):
    """Task owned by a user and filed under a category."""

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)

    # Relationships
    author = relationship("User", back_populates="tasks")
    category = relationship("Category", back_populates="tasks")
