# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from app.db.repositories.tasks import TaskRepository
from app.db.session import get_session, init_db
from app.main import app


@pytest.fixture()
def engine() -> Iterator[Engine]:
    """
    In-memory SQLite shared by every session of a test (StaticPool keeps
    a single connection, so the schema survives across sessions).
    """
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session(engine: Engine) -> Iterator[Session]:
    with Session(engine, expire_on_commit=False) as s:
        yield s


@pytest.fixture()
def repo(session: Session) -> TaskRepository:
    return TaskRepository(session)


@pytest.fixture()
def client(engine: Engine) -> Iterator[TestClient]:
    """HTTP client wired to the in-memory database instead of the configured one."""

    def _session_override() -> Iterator[Session]:
        with Session(engine, expire_on_commit=False) as s:
            yield s

    app.dependency_overrides[get_session] = _session_override
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
