"""Shared fixtures for the test suite.

Tests run against a shared in-memory SQLite database; tables are dropped and
recreated before every test.
"""

from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite://"

from typing import Any, Callable, Dict, Iterator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session  # noqa: E402

from debate_arena.app import app  # noqa: E402
from debate_arena.core import engine, init_db  # noqa: E402
from debate_arena.models import Debate  # noqa: E402
from debate_arena.store import DocumentStore  # noqa: E402


def debate_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "title": "Remote work beats the office",
        "description": "Is a distributed team more productive?",
        "tags": ["work", "productivity"],
        "category": "Business",
        "duration": "30",
    }
    payload.update(overrides)
    return payload


@pytest.fixture(autouse=True)
def fresh_db() -> Iterator[None]:
    init_db(reset=True)
    yield


@pytest.fixture
def session() -> Iterator[Session]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def store(session: Session) -> DocumentStore:
    return DocumentStore(session)


@pytest.fixture
def make_debate(store: DocumentStore) -> Callable[..., Debate]:
    def _make(**overrides: Any) -> Debate:
        payload = debate_payload(**overrides)
        return store.insert(Debate(**payload))

    return _make


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
