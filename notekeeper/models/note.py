"""Note model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from notekeeper.database import Base
from notekeeper.models.mixins import TimestampMixin


class Note(Base, TimestampMixin):
    """Note written by a user and filed under a category."""

    __tablename__ = "notes"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)

    # Relationships
    author = relationship("User", back_populates="notes")
    category = relationship("Category", back_populates="notes")
