# /tests/test_database_service.py

import mongomock
import pytest

from app.core.config import Settings, get_settings
from app.services import database_service
from app.services.database_helpers.halaqa_repository_mongo import DocumentRepository
from app.services.database_helpers.halaqa_repository_sql import SQLRepository
from app.services.database_helpers.memory_repository import MemoryRepository


@pytest.fixture
def fake_mongo_client(monkeypatch):
    """
    Replaces the pymongo client class where the factory uses it, so the
    document backend can be selected without a running server.
    """
    created = []

    def factory(url, **kwargs):
        created.append((url, kwargs))
        return mongomock.MongoClient()

    monkeypatch.setattr(database_service, "MongoClient", factory)
    return created


def test_no_database_url_selects_memory():
    """Tests that no database URL selects the in-memory store."""
    repo = database_service.create_repository(Settings(database_url=None))
    assert isinstance(repo, MemoryRepository)
    assert repo.backend_name == "memory"

def test_blank_database_url_selects_memory():
    """Tests that a blank database URL selects an unseeded in-memory store."""
    repo = database_service.create_repository(Settings(database_url="   ", seed_sample_data=False))
    assert isinstance(repo, MemoryRepository)
    assert repo.get_all_teachers() == []

def test_memory_backend_is_seeded_by_default():
    """Tests that the in-memory store is seeded with the demo roster by default."""
    repo = database_service.create_repository(Settings(database_url=None, seed_sample_data=True))
    assert len(repo.get_all_teachers()) == 13

@pytest.mark.parametrize("url", ["mongodb://localhost:27017", "mongodb+srv://cluster.example.net"])
def test_mongodb_url_selects_document_store(url, fake_mongo_client):
    """Tests that MongoDB URLs select the document store with the configured database."""
    repo = database_service.create_repository(Settings(database_url=url, document_db_name="circles"))
    assert isinstance(repo, DocumentRepository)
    assert repo.db.name == "circles"
    assert fake_mongo_client[0][0] == url
    assert fake_mongo_client[0][1]["serverSelectionTimeoutMS"] == 5000

def test_other_url_selects_relational_store():
    """Tests that any other URL selects the relational store."""
    repo = database_service.create_repository(Settings(database_url="sqlite://"))
    try:
        assert isinstance(repo, SQLRepository)
        assert repo.get_all_teachers() == []
    finally:
        repo.close()

def test_relational_store_starts_empty_and_usable(tmp_path, teacher_payload):
    """Tests that a file-backed relational store is created empty and accepts writes."""
    url = f"sqlite:///{tmp_path / 'halaqat.db'}"
    repo = database_service.create_repository(Settings(database_url=url))
    try:
        created = repo.create_teacher(teacher_payload)
        assert repo.get_teacher(created.id) == created
    finally:
        repo.close()

def test_get_settings_reads_environment(monkeypatch):
    """Tests that settings are read and normalized from the environment."""
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("DOCUMENT_DB_NAME", "other")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.setenv("SEED_SAMPLE_DATA", "false")

    settings = get_settings()
    assert settings.database_url == "sqlite://"
    assert settings.document_db_name == "other"
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"
    assert settings.seed_sample_data is False

def test_get_settings_defaults(monkeypatch):
    """Tests the settings defaults when no variables are set."""
    for name in ("DATABASE_URL", "DOCUMENT_DB_NAME", "LOG_LEVEL", "LOG_FORMAT", "SEED_SAMPLE_DATA"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()
    assert settings.database_url is None
    assert settings.document_db_name == "halaqat"
    assert settings.seed_sample_data is True

def test_empty_environment_values_count_as_unset(monkeypatch):
    """Tests that blank variables fall back to the defaults instead of failing to parse."""
    monkeypatch.setenv("DATABASE_URL", "")
    monkeypatch.setenv("SEED_SAMPLE_DATA", "")

    settings = get_settings()
    assert settings.database_url is None
    assert settings.seed_sample_data is True
