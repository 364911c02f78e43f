"""User model."""

from sqlalchemy import JSON, Column, Integer, String
from sqlalchemy.orm import relationship

from notekeeper.database import Base
from notekeeper.models.enums import UserRole
from notekeeper.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(180), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    stored_roles = Column("roles", JSON, nullable=False, default=list)

    # Relationships; children are removed by UserService, not by the database
    notes = relationship("Note", back_populates="author", passive_deletes="all")
    tasks = relationship("Task", back_populates="author", passive_deletes="all")

    @property
    def roles(self) -> list[str]:
        """Roles held by the user. Every user holds ROLE_USER."""
        roles = list(self.stored_roles or [])
        if UserRole.USER.value not in roles:
            roles.append(UserRole.USER.value)
        return roles

    @roles.setter
    def roles(self, value: list[str]) -> None:
        self.stored_roles = sorted({UserRole(role).value for role in value})

    @property
    def is_admin(self) -> bool:
        """Check if the user holds the admin role."""
        return UserRole.ADMIN.value in self.roles
