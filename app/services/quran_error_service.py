# /halaqat-backend/app/services/quran_error_service.py

"""
Verse marks made while a teacher reads along in the Quran viewer.

A student has at most one mark per (verse, page). The storage layer does
not enforce that; `toggle_verse_error` does, by removing an existing mark
instead of adding a second one.
"""

import logging
from typing import List, Optional, Tuple

from ..models.quran_error_model import QuranError, QuranErrorCreate
from .database_helpers.base_repository import BaseRepository

logger = logging.getLogger(__name__)


def list_errors_for_student(student_id: str, db: BaseRepository) -> List[QuranError]:
    return db.get_quran_errors_by_student(student_id)


def create_error(error_data: QuranErrorCreate, db: BaseRepository) -> Optional[QuranError]:
    return db.create_quran_error(error_data)


def delete_error(error_id: str, db: BaseRepository) -> bool:
    return db.delete_quran_error(error_id)


def find_verse_error(student_id: str, verse: int, page_number: int, db: BaseRepository) -> Optional[QuranError]:
    for error in db.get_quran_errors_by_student(student_id):
        if error.verse == verse and error.pageNumber == page_number:
            return error
    return None


def toggle_verse_error(error_data: QuranErrorCreate, db: BaseRepository) -> Optional[Tuple[str, QuranError]]:
    """
    Marks the verse, or un-marks it if it is already marked on that page.
    Returns ("added" | "removed", error), or None if the backend failed.
    """
    existing = find_verse_error(error_data.studentId, error_data.verse, error_data.pageNumber, db)
    if existing is not None:
        if not db.delete_quran_error(existing.id):
            return None
        return "removed", existing

    created = db.create_quran_error(error_data)
    if created is None:
        return None
    return "added", created


def clear_page(student_id: str, page_number: int, db: BaseRepository) -> int:
    """
    Removes every mark the student has on one page. Each delete is an
    independent call; the count reflects only the deletes that succeeded.
    """
    deleted = 0
    for error in db.get_quran_errors_by_student(student_id):
        if error.pageNumber != page_number:
            continue
        if db.delete_quran_error(error.id):
            deleted += 1
        else:
            logger.warning("Could not delete quran error %s while clearing page %d", error.id, page_number)
    return deleted
