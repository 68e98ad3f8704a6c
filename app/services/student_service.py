# /halaqat-backend/app/services/student_service.py

"""
This service module is the business logic layer for student roster
operations. Routers call it; it calls the repository.
"""

import logging
from typing import List, Optional

from ..core import messages
from ..models.student_model import Student, StudentCreate, StudentFields, StudentUpdate
from .database_helpers.base_repository import BaseRepository

logger = logging.getLogger(__name__)


def list_all_students(db: BaseRepository) -> List[Student]:
    return db.get_all_students()


def list_students_for_teacher(teacher_id: str, db: BaseRepository) -> List[Student]:
    return db.get_students_by_teacher(teacher_id)


def list_students_for_parent(parent_id: str, db: BaseRepository) -> List[Student]:
    return db.get_students_by_parent(parent_id)


def get_student(student_id: str, db: BaseRepository) -> Optional[Student]:
    return db.get_student(student_id)


def add_student_to_teacher(teacher_id: str, student_data: StudentFields, db: BaseRepository) -> Optional[Student]:
    """
    Stamps the owning teacher from the URL onto the submitted form and
    persists it. Returns None if the backend could not store it.
    """
    new_student = StudentCreate(**student_data.model_dump(), teacherId=teacher_id)
    student = db.create_student(new_student)
    if student is not None:
        logger.info("Created student %s under teacher %s", student.id, teacher_id)
    return student


def update_student(student_id: str, student_update: StudentUpdate, db: BaseRepository) -> Optional[Student]:
    update_data = student_update.model_dump(exclude_unset=True)
    if not update_data:
        raise ValueError(messages.NO_UPDATE_DATA)
    return db.update_student(student_id, student_update)


def delete_student(student_id: str, db: BaseRepository) -> bool:
    """
    Deletes a student together with their daily records and quran errors.

    The dependent rows go first, one delete at a time, so a relational
    foreign key never blocks the final delete. There is no all-or-nothing
    guarantee: a failure partway leaves the already-deleted rows deleted.
    """
    if db.get_student(student_id) is None:
        return False

    for record in db.get_daily_records_by_student(student_id):
        db.delete_daily_record(record.id)
    for error in db.get_quran_errors_by_student(student_id):
        db.delete_quran_error(error.id)

    was_deleted = db.delete_student(student_id)
    if was_deleted:
        logger.info("Deleted student %s", student_id)
    return was_deleted
