"""Pydantic schemas for API requests and responses."""

from notekeeper.schemas.auth import AuthResponse, Token, UserLogin, UserResponse
from notekeeper.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from notekeeper.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from notekeeper.schemas.pagination import FlashMessage, FormResponse, IndexResponse, Page
from notekeeper.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from notekeeper.schemas.user import UserCreate, UserDetail, UserUpdate

__all__ = [
    "UserLogin",
    "Token",
    "AuthResponse",
    "UserResponse",
    "UserCreate",
    "UserUpdate",
    "UserDetail",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
    "Page",
    "IndexResponse",
    "FormResponse",
    "FlashMessage",
]
