# /halaqat-backend/app/services/record_service.py

import logging
from typing import List, Optional

from ..core import messages
from ..models.record_model import DailyRecord, DailyRecordCreate, DailyRecordFields, DailyRecordUpdate
from .database_helpers.base_repository import BaseRepository

logger = logging.getLogger(__name__)


def list_records_for_teacher(teacher_id: str, db: BaseRepository) -> List[DailyRecord]:
    return db.get_daily_records_by_teacher(teacher_id)


def list_records_for_student(student_id: str, db: BaseRepository) -> List[DailyRecord]:
    return db.get_daily_records_by_student(student_id)


def get_record(record_id: str, db: BaseRepository) -> Optional[DailyRecord]:
    return db.get_daily_record(record_id)


def create_record(record_data: DailyRecordCreate, db: BaseRepository) -> Optional[DailyRecord]:
    record = db.create_daily_record(record_data)
    if record is not None:
        logger.info("Created daily record %s for student %s", record.id, record.studentId)
    return record


def create_record_for_teacher(teacher_id: str, record_data: DailyRecordFields, db: BaseRepository) -> Optional[DailyRecord]:
    """The teacher comes from the URL, never from the submitted form."""
    return create_record(DailyRecordCreate(**record_data.model_dump(), teacherId=teacher_id), db)


def update_record(record_id: str, record_update: DailyRecordUpdate, db: BaseRepository) -> Optional[DailyRecord]:
    if not record_update.model_dump(exclude_unset=True):
        raise ValueError(messages.NO_UPDATE_DATA)
    return db.update_daily_record(record_id, record_update)


def delete_record(record_id: str, db: BaseRepository) -> bool:
    return db.delete_daily_record(record_id)
