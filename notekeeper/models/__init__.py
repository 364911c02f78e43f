"""SQLAlchemy models."""

from notekeeper.models.category import Category
from notekeeper.models.note import Note
from notekeeper.models.task import Task
from notekeeper.models.user import User

__all__ = [
    "User",
    "Category",
    "Note",
    "Task",
]
