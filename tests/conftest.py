"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from notekeeper.database import Base, get_db
from notekeeper.main import app
from notekeeper.models.category import Category
from notekeeper.models.enums import UserRole
from notekeeper.models.user import User
from notekeeper.services.auth import create_access_token
from notekeeper.services.category import CategoryService
from notekeeper.services.users import UserService

TEST_PASSWORD = "testpass123"  # noqa: S105


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/notekeeper", "/notekeeper_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    """Factory that registers a user and returns it."""

    def _make_user(email: str, admin: bool = False) -> User:
        service = UserService(db)
        user = service.register(User(email=email), TEST_PASSWORD)
        if admin:
            user.roles = [UserRole.USER, UserRole.ADMIN]
            service.save(user)
        return user

    return _make_user


def headers_for(user: User) -> AuthHeaders:
    """Bearer headers for a user."""
    token = create_access_token(user.id, user.email)
    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user.id, email=user.email)


@pytest.fixture
def user(make_user):
    """A regular user."""
    return make_user("test@example.com")


@pytest.fixture
def other_user(make_user):
    """A second regular user."""
    return make_user("other@example.com")


@pytest.fixture
def admin(make_user):
    """An administrator."""
    return make_user("admin@example.com", admin=True)


@pytest.fixture
def auth_headers(user):
    """Auth headers for the regular user."""
    return headers_for(user)


@pytest.fixture
def other_headers(other_user):
    """Auth headers for the second regular user."""
    return headers_for(other_user)


@pytest.fixture
def admin_headers(admin):
    """Auth headers for the administrator."""
    return headers_for(admin)


@pytest.fixture
def category(db):
    """A category with no notes or tasks."""
    return CategoryService(db).save(Category(title="Groceries"))
