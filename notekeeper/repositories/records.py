"""Repositories for user-owned records (notes and tasks)."""

from sqlalchemy import func
from sqlalchemy.orm import Query

from notekeeper.models.note import Note
from notekeeper.models.task import Task
from notekeeper.models.user import User
from notekeeper.repositories.base import ModelT, Repository


class RecordRepository(Repository[ModelT]):
    """Author-scoped and category-scoped queries shared by notes and tasks."""

    def query_all(self) -> Query:
        """All records, most recently updated first."""
        return self.query().order_by(self.model.updated_at.desc(), self.model.id.desc())

    def query_by_author(self, author: User) -> Query:
        """Records owned by one author, most recently updated first."""
        return self.query_all().filter(self.model.author_id == author.id)

    def count_by_category(self, category_id: int) -> int:
        """Count records filed under a category."""
        return (
            self.db.query(func.count(self.model.id))
            .filter(self.model.category_id == category_id)
            .scalar()
        )

    def delete_by_author(self, author: User) -> int:
        """Delete every record owned by an author without committing.

        Returns the number of deleted rows.
        """
        return (
            self.query()
            .filter(self.model.author_id == author.id)
            .delete(synchronize_session="fetch")
        )


class NoteRepository(RecordRepository[Note]):
    """Note persistence."""

    model = Note


class TaskRepository(RecordRepository[Task]):
    """Task persistence."""

    model = Task
