# /halaqat-backend/app/services/database_service.py

"""
Backend selection and the FastAPI dependency that hands the repository to
the routers.

The backend is chosen once, at application startup, from DATABASE_URL:

- unset or empty           -> in-memory store (seeded demo roster)
- mongodb:// / mongodb+srv:// -> document store
- any other SQLAlchemy URL -> relational store

Nothing else in the application branches on the backend type.
"""

import logging

from fastapi import Request
from pymongo import MongoClient

from app.core.config import Settings
from app.db.database import build_engine

from .database_helpers.base_repository import BaseRepository
from .database_helpers.halaqa_repository_mongo import DocumentRepository
from .database_helpers.halaqa_repository_sql import SQLRepository
from .database_helpers.memory_repository import MemoryRepository

logger = logging.getLogger(__name__)

DOCUMENT_URL_SCHEMES = ("mongodb://", "mongodb+srv://")


def create_repository(settings: Settings) -> BaseRepository:
    database_url = (settings.database_url or "").strip()

    if not database_url:
        logger.info("DATABASE_URL is not set, using in-memory storage")
        return MemoryRepository(seed=settings.seed_sample_data)

    if database_url.startswith(DOCUMENT_URL_SCHEMES):
        logger.info("Using document storage, database '%s'", settings.document_db_name)
        client = MongoClient(database_url, serverSelectionTimeoutMS=5000)
        return DocumentRepository(client, database_name=settings.document_db_name)

    logger.info("Using relational storage")
    return SQLRepository(build_engine(database_url))


# --- DEPENDENCY PROVIDER ---
def get_db_service(request: Request) -> BaseRepository:
    """
    FastAPI dependency returning the repository built at startup. Tests
    replace it by passing their own repository to `create_app`.
    """
    return request.app.state.repository
