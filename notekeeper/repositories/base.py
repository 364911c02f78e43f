"""Shared persistence helpers for repositories."""

import logging
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from notekeeper.config import get_settings
from notekeeper.schemas.pagination import Page

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """Query, save and delete one model class against the relational store.

    Mutating methods commit by default. Pass ``commit=False`` to stage the
    change in the caller's transaction and call :meth:`commit` yourself.
    """

    model: ClassVar[type[Any]]

    def __init__(self, db: Session, per_page: int | None = None):
        self.db = db
        self.per_page = per_page or get_settings().items_per_page

    def query(self) -> Query:
        """Base query for the model."""
        return self.db.query(self.model)

    def find_by_id(self, entity_id: int) -> ModelT | None:
        """Get an entity by primary key, or None if absent."""
        return self.query().filter(self.model.id == entity_id).first()

    def save(self, entity: ModelT, commit: bool = True) -> ModelT:
        """Insert or update an entity."""
        self.db.add(entity)
        if commit:
            self.commit()
            self.db.refresh(entity)
        else:
            self.db.flush()
        return entity

    def delete(self, entity: ModelT, commit: bool = True) -> None:
        """Delete an entity."""
        self.db.delete(entity)
        if commit:
            self.commit()
        else:
            self.db.flush()

    def commit(self) -> None:
        """Commit the session, rolling back if the store refuses."""
        try:
            self.db.commit()
        except SQLAlchemyError:
            logger.exception(f"Commit failed for {self.model.__name__}, rolling back")
            self.db.rollback()
            raise

    def paginate(self, query: Query, page: int) -> Page:
        """Slice an ordered query into one page of results."""
        page = max(page, 1)
        total = query.order_by(None).count()
        items = query.offset((page - 1) * self.per_page).limit(self.per_page).all()
        return Page(items=items, total=total, page=page, per_page=self.per_page)
