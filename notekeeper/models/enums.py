"""Enums for model fields."""

from enum import Enum


class UserRole(str, Enum):
    """Roles a user can hold."""

    USER = "ROLE_USER"
    ADMIN = "ROLE_ADMIN"


class Action(str, Enum):
    """Actions checked by the access-control policy."""

    VIEW = "VIEW"
    EDIT = "EDIT"
    DELETE = "DELETE"
    LIST = "LIST"
