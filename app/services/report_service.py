# /halaqat-backend/app/services/report_service.py

"""
Progress reports built from daily records.

The repository hands back lists of Pydantic records; this module loads them
into pandas DataFrames for the aggregation and returns validated report
models (or CSV text for the export).
"""

import math
from typing import List, Optional

import pandas as pd

from ..models.quran_error_model import ErrorType
from ..models.record_model import DailyRecord, Rating
from ..models.report_model import ProgressSummary, StudentReport, StudentReportRow, TeacherReport
from .database_helpers.base_repository import BaseRepository

RECORD_COLUMNS = ["studentId", "pageCount", "behavior"]
RECENT_RECORD_LIMIT = 5
EXPORT_COLUMNS = [
    "Student Name",
    "Level",
    "Attendance Days",
    "Total Pages",
    "Average Pages",
    "Good Behavior %",
]


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _records_frame(records: List[DailyRecord]) -> pd.DataFrame:
    if not records:
        return pd.DataFrame(columns=RECORD_COLUMNS)
    rows = [record.model_dump(mode="json", include=set(RECORD_COLUMNS)) for record in records]
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)


def summarize_records(records_df: pd.DataFrame) -> ProgressSummary:
    """
    Every recorded day counts as attended. Missing page counts count as
    zero pages; a missing behavior rating counts as not 'good'.
    """
    attendance_days = int(len(records_df))
    if attendance_days == 0:
        return ProgressSummary()

    total_pages = int(pd.to_numeric(records_df["pageCount"], errors="coerce").fillna(0).sum())
    good_days = int((records_df["behavior"] == Rating.GOOD.value).sum())

    return ProgressSummary(
        attendanceDays=attendance_days,
        totalPages=total_pages,
        averagePages=_round_half_up(total_pages / attendance_days, 1),
        behaviorPercentage=int(_round_half_up(good_days / attendance_days * 100)),
    )


def build_student_report(student_id: str, db: BaseRepository) -> Optional[StudentReport]:
    student = db.get_student(student_id)
    if student is None:
        return None

    records = db.get_daily_records_by_student(student_id)
    summary = summarize_records(_records_frame(records))

    errors = db.get_quran_errors_by_student(student_id)
    type_counts = pd.Series([e.errorType.value for e in errors], dtype="object").value_counts()
    error_counts = {error_type.value: int(type_counts.get(error_type.value, 0)) for error_type in ErrorType}

    return StudentReport(
        student=student,
        quranErrorCounts=error_counts,
        recentRecords=records[:RECENT_RECORD_LIMIT],
        **summary.model_dump(),
    )


def build_teacher_report(teacher_id: str, db: BaseRepository) -> Optional[TeacherReport]:
    """One row per student currently in the teacher's circle; students without records get zeros."""
    if db.get_teacher(teacher_id) is None:
        return None

    students = db.get_students_by_teacher(teacher_id)
    records_df = _records_frame(db.get_daily_records_by_teacher(teacher_id))
    groups = dict(tuple(records_df.groupby("studentId"))) if not records_df.empty else {}
    empty = records_df.iloc[0:0]

    rows = []
    for student in students:
        summary = summarize_records(groups.get(student.id, empty))
        rows.append(StudentReportRow(
            studentId=student.id,
            studentName=student.name,
            level=student.level.value,
            **summary.model_dump(),
        ))
    return TeacherReport(teacherId=teacher_id, studentCount=len(students), rows=rows)


def export_teacher_report_csv(teacher_id: str, db: BaseRepository) -> str:
    report = build_teacher_report(teacher_id, db)
    if report is None:
        raise ValueError(f"Teacher with ID {teacher_id} not found.")

    export_data = [
        {
            "Student Name": row.studentName,
            "Level": row.level,
            "Attendance Days": row.attendanceDays,
            "Total Pages": row.totalPages,
            "Average Pages": row.averagePages,
            "Good Behavior %": row.behaviorPercentage,
        }
        for row in report.rows
    ]
    df = pd.DataFrame(export_data, columns=EXPORT_COLUMNS)
    return df.to_csv(index=False)
