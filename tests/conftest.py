import os

# Settings are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BETTER_AUTH_SECRET"] = "test-secret"
os.environ["REPORTS_TIMEZONE"] = "UTC"

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from database import get_session
from models import Task, TodoList, User

# Fixed "now" for reports: 2024-01-11 12:00 UTC
NOW = datetime(2024, 1, 11, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="function")
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(scope="function")
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(scope="function")
def client(session):
    from main import app

    def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides = {}


@pytest.fixture
def make_user(session):
    def _make_user(user_id="user-1", created_at=NOW - timedelta(days=10)):
        user = User(id=user_id, created_at=created_at)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user
    return _make_user


@pytest.fixture
def make_todo_list(session):
    def _make_todo_list(user):
        todo_list = TodoList(user_id=user.id)
        session.add(todo_list)
        session.commit()
        session.refresh(todo_list)
        return todo_list
    return _make_todo_list


@pytest.fixture
def make_task(session):
    def _make_task(todo_list, due, completed_at=None, title="Task"):
        task = Task(
            todo_list_id=todo_list.id,
            title=title,
            completion_status=completed_at is not None,
            completion_date_time=completed_at,
            due_date_time=due,
        )
        session.add(task)
        session.commit()
        return task
    return _make_task


@pytest.fixture
def auth_headers():
    def _auth_headers(user_id="user-1"):
        token = jwt.encode(
            {"sub": user_id, "exp": datetime.now(timezone.utc) + timedelta(minutes=30)},
            "test-secret",
            algorithm="HS256",
        )
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers
