# tests/conftest.py
import os

# Must be set before skyadmin.db.database creates its engine
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("OTEL_TRACES_CONSOLE", "false")
os.environ.setdefault("JWT_ADMIN_SECRET", "test-secret")

from datetime import datetime

import pytest
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from skyadmin.main import app
from skyadmin.db.database import Base
from skyadmin import context

# Import models so metadata knows about all tables
import skyadmin.models.employee


@pytest.fixture(scope="session")
def engine():
    """Create an in-memory SQLite database shared across tests and threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)


@pytest.fixture(autouse=True)
def clean_db(engine):
    """Reset all tables before each test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture(autouse=True)
def clear_actor():
    """No test starts (or leaves) with an actor bound."""
    context.clear()
    yield
    context.clear()


@pytest.fixture()
def db(engine):
    """Return a new SQLAlchemy session for each test."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def fixed_clock(monkeypatch):
    """Freeze the audit clock at a known instant; call it to move the clock."""
    state = {"now": datetime(2024, 5, 1, 9, 30, 0)}
    monkeypatch.setattr("skyadmin.auto_fill._now", lambda: state["now"])

    def move_to(value: datetime) -> datetime:
        state["now"] = value
        return value

    move_to(state["now"])
    return move_to


def make_token(emp_id) -> str:
    return jwt.encode({"empId": emp_id}, os.environ["JWT_ADMIN_SECRET"], algorithm="HS256")


@pytest.fixture
def auth_headers():
    """Build admin headers carrying a token for the given employee id."""
    def _headers(emp_id=1):
        return {"token": make_token(emp_id)}
    return _headers


@pytest.fixture
def client(db):
    """FastAPI test client that routes all DB deps to the test session."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    from skyadmin.db.database import get_db as db_get_db

    app.dependency_overrides[db_get_db] = override_get_db

    test_client = TestClient(app)
    try:
        yield test_client
    finally:
        app.dependency_overrides.clear()
