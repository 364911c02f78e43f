"""Note and task services.

Notes and tasks share one service shape; the subclasses only pick the
repository.
"""

import logging
from typing import ClassVar, Generic

from sqlalchemy.orm import Session

from notekeeper.models.note import Note
from notekeeper.models.task import Task
from notekeeper.models.user import User
from notekeeper.repositories.base import ModelT
from notekeeper.repositories.records import NoteRepository, RecordRepository, TaskRepository
from notekeeper.schemas.pagination import Page

logger = logging.getLogger(__name__)


class RecordService(Generic[ModelT]):
    """CRUD for records owned by a single author."""

    repository_class: ClassVar[type[RecordRepository]]

    def __init__(self, db: Session):
        self.db = db
        self.repository = self.repository_class(db)

    def list_paginated(self, page: int, author: User) -> Page:
        """Get one page of the author's records, most recently updated first."""
        return self.repository.paginate(self.repository.query_by_author(author), page)

    def find_by_id(self, record_id: int) -> ModelT | None:
        """Get a record, or None if it does not exist."""
        return self.repository.find_by_id(record_id)

    def save(self, record: ModelT) -> ModelT:
        """Create or update a record."""
        return self.repository.save(record)

    def delete(self, record: ModelT) -> None:
        """Delete a record."""
        record_id = record.id
        self.repository.delete(record)
        logger.info(f"Deleted {type(record).__name__.lower()} {record_id}")


class NoteService(RecordService[Note]):
    """Service for note operations."""

    repository_class = NoteRepository


class TaskService(RecordService[Task]):
    """Service for task operations."""

    repository_class = TaskRepository
