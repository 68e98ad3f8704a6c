# /halaqat-backend/app/services/database_helpers/halaqa_repository_sql.py

"""
This module contains the SQLAlchemy implementation of the storage contract.
It is the direct interface to the relational database for teachers, parents,
students, daily records and quran errors.

One session is opened per operation from a process-wide engine. A failed
commit leaves the `with` block with an exception, the session rolls back,
and no half-written row survives.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

# Importing through the registry makes every table known to Base.metadata.
from app.db.base import Base
from app.db.models.halaqa_models import DailyRecord, Parent, QuranError, Student, Teacher

from .base_repository import BaseRepository, EntityKind, Record
from .field_mapping import record_to_columns, row_to_record, to_column

logger = logging.getLogger(__name__)

ORM_MODELS = {
    EntityKind.TEACHER: Teacher,
    EntityKind.PARENT: Parent,
    EntityKind.STUDENT: Student,
    EntityKind.DAILY_RECORD: DailyRecord,
    EntityKind.QURAN_ERROR: QuranError,
}


class SQLRepository(BaseRepository):
    backend_name = "relational"

    def __init__(
        self,
        engine: Engine,
        create_schema: bool = True,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        super().__init__(clock=clock)
        self.engine = engine
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
        )
        if create_schema:
            try:
                Base.metadata.create_all(bind=engine)
            except Exception:
                # Operations will soft-fail until the database is reachable.
                logger.exception("Could not create the relational schema")

    def close(self) -> None:
        self.engine.dispose()

    def _fetch(self, kind: EntityKind, entity_id: str) -> Optional[Record]:
        with self.SessionLocal() as db:
            row = db.get(ORM_MODELS[kind], entity_id)
            return row_to_record(row) if row is not None else None

    def _query(self, kind: EntityKind, filters: Record, newest_first: bool = False) -> List[Record]:
        model = ORM_MODELS[kind]
        with self.SessionLocal() as db:
            query = db.query(model)
            for field_name, value in filters.items():
                query = query.filter(getattr(model, to_column(field_name)) == value)
            if newest_first:
                query = query.order_by(model.created_at.desc())
            return [row_to_record(row) for row in query.all()]

    def _insert(self, kind: EntityKind, record: Record) -> Record:
        with self.SessionLocal() as db:
            new_row = ORM_MODELS[kind](**record_to_columns(record))
            db.add(new_row)
            db.commit()
            db.refresh(new_row)
            return row_to_record(new_row)

    def _update(self, kind: EntityKind, entity_id: str, changes: Record) -> Optional[Record]:
        with self.SessionLocal() as db:
            row = db.get(ORM_MODELS[kind], entity_id)
            if row is None:
                return None
            for key, value in record_to_columns(changes).items():
                setattr(row, key, value)
            db.commit()
            db.refresh(row)
            return row_to_record(row)

    def _remove(self, kind: EntityKind, entity_id: str) -> bool:
        with self.SessionLocal() as db:
            row = db.get(ORM_MODELS[kind], entity_id)
            if row is None:
                return False
            db.delete(row)
            db.commit()
            return True
