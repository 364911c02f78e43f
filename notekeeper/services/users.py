"""User management service."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from notekeeper.models.user import User
from notekeeper.repositories.records import NoteRepository, TaskRepository
from notekeeper.repositories.user import UserRepository
from notekeeper.schemas.pagination import Page
from notekeeper.services.auth import get_password_hash

logger = logging.getLogger(__name__)


class EmailAlreadyRegisteredError(Exception):
    """Raised when an email is already used by another user."""

    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


class UserService:
    """Service for user management."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.notes = NoteRepository(db)
        self.tasks = TaskRepository(db)

    def list_paginated(self, page: int) -> Page:
        """Get one page of users, newest first."""
        return self.users.paginate(self.users.query_all(), page)

    def find_by_id(self, user_id: int) -> User | None:
        """Get a user, or None if it does not exist."""
        return self.users.find_by_id(user_id)

    def find_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.users.find_by_email(email)

    def register(self, user: User, plain_password: str) -> User:
        """Hash the password, grant the default role and store the user."""
        self._ensure_email_available(user)
        email = user.email
        try:
            user = self.users.register(user, get_password_hash(plain_password))
        except IntegrityError as e:
            # Registered concurrently after the availability check
            raise EmailAlreadyRegisteredError(email) from e
        logger.info(f"Registered user {user.id}")
        return user

    def save(self, user: User) -> User:
        """Store changes to a user's email or roles.

        Pending changes are discarded if the new email belongs to someone else.
        """
        email = user.email
        try:
            self._ensure_email_available(user)
        except EmailAlreadyRegisteredError:
            self.db.rollback()
            raise
        try:
            return self.users.save(user)
        except IntegrityError as e:
            raise EmailAlreadyRegisteredError(email) from e

    def change_password(self, user: User, plain_password: str) -> User:
        """Replace a user's password."""
        user.password_hash = get_password_hash(plain_password)
        return self.users.save(user)

    def delete_with_dependents(self, user: User) -> int:
        """Delete a user's notes, then tasks, then the user, in one transaction.

        If any step fails everything is rolled back and the user keeps all of
        its notes and tasks. Returns the number of deleted rows.
        """
        user_id = user.id
        try:
            deleted = self.notes.delete_by_author(user)
            deleted += self.tasks.delete_by_author(user)
            self.users.delete(user, commit=False)
            self.db.commit()
        except SQLAlchemyError:
            logger.exception(f"Deleting user {user_id} failed, nothing was removed")
            self.db.rollback()
            raise
        deleted += 1
        logger.info(f"Deleted user {user_id} with {deleted - 1} dependent records")
        return deleted

    def _ensure_email_available(self, user: User) -> None:
        existing = self.users.find_by_email(user.email)
        if existing is not None and existing.id != user.id:
            raise EmailAlreadyRegisteredError(user.email)
