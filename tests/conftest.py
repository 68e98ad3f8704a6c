# /tests/conftest.py

from datetime import datetime, timedelta, timezone

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.db.database import build_engine
from app.main import create_app
from app.services.database_helpers.halaqa_repository_mongo import DocumentRepository
from app.services.database_helpers.halaqa_repository_sql import SQLRepository
from app.services.database_helpers.memory_repository import MemoryRepository


class FakeClock:
    """Returns a strictly increasing time, one millisecond per call."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)

    def __call__(self):
        self.now = self.now + timedelta(milliseconds=1)
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_repo(clock):
    """A fresh, empty in-memory repository for each test."""
    return MemoryRepository(seed=False, clock=clock)


@pytest.fixture
def sql_repo(clock):
    """A relational repository on a private in-memory SQLite database."""
    repo = SQLRepository(build_engine("sqlite://"), clock=clock)
    yield repo
    repo.close()


@pytest.fixture
def mongo_repo(clock):
    """A document repository on mongomock, so no server is needed."""
    return DocumentRepository(mongomock.MongoClient(), database_name="halaqat_test", clock=clock)


@pytest.fixture(params=["memory", "relational", "document"])
def repo(request):
    """Runs the requesting test once against every storage backend."""
    fixture_name = {
        "memory": "memory_repo",
        "relational": "sql_repo",
        "document": "mongo_repo",
    }[request.param]
    return request.getfixturevalue(fixture_name)


@pytest.fixture
def teacher_payload():
    return {
        "username": "t1",
        "password": "p1",
        "name": "Teacher One",
        "gender": "male",
        "circleName": "C1",
    }


@pytest.fixture
def parent_payload():
    return {
        "username": "parent1",
        "password": "secret",
        "fatherName": "أحمد محمد",
        "motherName": "فاطمة علي",
        "phone": "0505123456",
        "email": "ahmed@example.com",
    }


@pytest.fixture
def api_repo():
    return MemoryRepository(seed=False)


@pytest.fixture
def client(api_repo):
    """A TestClient over an app wired to a fresh, empty memory repository."""
    return TestClient(create_app(repository=api_repo))
