"""User repository."""

from sqlalchemy.orm import Query

from notekeeper.models.enums import UserRole
from notekeeper.models.user import User
from notekeeper.repositories.base import Repository


class UserRepository(Repository[User]):
    """User persistence."""

    model = User

    def query_all(self) -> Query:
        """All users, newest id first."""
        return self.query().order_by(User.id.desc())

    def find_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.query().filter(User.email == email).first()

    def register(self, user: User, hashed_password: str) -> User:
        """Store a new user with the default role."""
        user.password_hash = hashed_password
        user.roles = [UserRole.USER]
        return self.save(user)

    def upgrade_password(self, user: User, new_hashed_password: str) -> None:
        """Replace a stored hash, e.g. after a rehash on login."""
        user.password_hash = new_hashed_password
        self.save(user)
