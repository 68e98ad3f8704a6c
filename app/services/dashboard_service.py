# /halaqat-backend/app/services/dashboard_service.py

# --- Core Imports ---
import logging
from typing import Optional

import pandas as pd

from ..models.dashboard_model import DashboardSummary
from .database_helpers.base_repository import BaseRepository

logger = logging.getLogger(__name__)

# --- Core Public Function ---

def get_summary_data(teacher_id: str, db: BaseRepository) -> Optional[DashboardSummary]:
    """
    Calculates the dashboard cards for one teacher.

    Args:
        teacher_id: The teacher whose circle is summarized.
        db: The repository, provided by dependency injection.

    Returns:
        A DashboardSummary, or None when the teacher does not exist.
    """
    if db.get_teacher(teacher_id) is None:
        return None

    students = db.get_students_by_teacher(teacher_id)
    records = db.get_daily_records_by_teacher(teacher_id)
    error_count = sum(len(db.get_quran_errors_by_student(s.id)) for s in students)

    levels = pd.Series([s.level.value for s in students], dtype="object")
    level_counts = {str(level): int(count) for level, count in levels.value_counts().items()}

    return DashboardSummary(
        studentCount=len(students),
        recordCount=len(records),
        quranErrorCount=error_count,
        levelCounts=level_counts,
    )
