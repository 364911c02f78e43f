"""Category service."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from notekeeper.models.category import Category, slugify
from notekeeper.repositories.category import CategoryRepository
from notekeeper.repositories.records import NoteRepository, TaskRepository
from notekeeper.schemas.pagination import Page

logger = logging.getLogger(__name__)

SLUG_LENGTH = Category.__table__.c.slug.type.length
SAVE_ATTEMPTS = 3


class CategoryService:
    """Service for category operations."""

    def __init__(self, db: Session):
        self.db = db
        self.categories = CategoryRepository(db)
        self.notes = NoteRepository(db)
        self.tasks = TaskRepository(db)

    def list_paginated(self, page: int) -> Page:
        """Get one page of categories."""
        return self.categories.paginate(self.categories.query_all(), page)

    def find_by_id(self, category_id: int) -> Category | None:
        """Get a category, or None if it does not exist."""
        return self.categories.find_by_id(category_id)

    def exists(self, category_id: int) -> bool:
        """Check if a category with this id exists."""
        return self.find_by_id(category_id) is not None

    def save(self, category: Category) -> Category:
        """Create or update a category, keeping its slug unique.

        A slug claimed by a concurrent save between the lookup and the commit
        makes the insert fail; the slug is then recomputed and the save retried.
        """
        title = category.title
        attempt = 1
        while True:
            # A rollback expires pending changes on a persistent category
            category.title = title
            slug = self._unique_slug(category)
            category.slug = slug
            try:
                return self.categories.save(category)
            except IntegrityError:
                if attempt == SAVE_ATTEMPTS:
                    raise
                attempt += 1
                logger.warning(f"Slug {slug} was taken concurrently, retrying")

    def delete(self, category: Category) -> None:
        """Delete a category. Check can_be_deleted first."""
        category_id, slug = category.id, category.slug
        self.categories.delete(category)
        logger.info(f"Deleted category {category_id} ({slug})")

    def can_be_deleted(self, category_id: int) -> bool:
        """Check that no note and no task references the category.

        The category row stays locked until the caller commits, so a delete
        issued in the same transaction cannot race a new dependent.
        """
        category = self.categories.find_by_id_for_update(category_id)
        if category is None:
            return False
        note_count = self.notes.count_by_category(category.id)
        task_count = self.tasks.count_by_category(category.id)
        return note_count == 0 and task_count == 0

    def _unique_slug(self, category: Category) -> str:
        base = slugify(category.title)[:SLUG_LENGTH].strip("-") or "category"
        slug = base
        suffix = 1
        while True:
            existing = self.categories.find_by_slug(slug)
            if existing is None or existing.id == category.id:
                return slug
            suffix += 1
            tail = f"-{suffix}"
            slug = base[: SLUG_LENGTH - len(tail)].rstrip("-") + tail
