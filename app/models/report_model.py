# /halaqat-backend/app/models/report_model.py

from typing import Dict, List

from pydantic import BaseModel, Field

from .record_model import DailyRecord
from .student_model import Student


class ProgressSummary(BaseModel):
    """Aggregates over a student's daily records."""
    attendanceDays: int = 0
    totalPages: int = 0
    averagePages: float = Field(default=0.0, description="Pages per recorded day, one decimal.")
    behaviorPercentage: int = Field(default=0, description="Share of recorded days rated 'good', 0-100.")


class StudentReport(ProgressSummary):
    student: Student
    quranErrorCounts: Dict[str, int] = Field(default_factory=dict)
    recentRecords: List[DailyRecord] = Field(default_factory=list)


class StudentReportRow(ProgressSummary):
    studentId: str
    studentName: str
    level: str


class TeacherReport(BaseModel):
    teacherId: str
    studentCount: int
    rows: List[StudentReportRow]
