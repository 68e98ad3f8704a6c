# /halaqat-backend/app/models/record_model.py

"""
Contracts for a daily memorization/review session record.

Every numeric field, the total score included, is entered by the teacher.
Nothing here is derived or aggregated at write time.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from typing_extensions import Annotated

from .common import OptionalText, RequiredText, blank_to_none, reject_explicit_null


class Rating(str, Enum):
    GOOD = "good"
    BAD = "bad"


OptionalRating = Annotated[Optional[Rating], BeforeValidator(blank_to_none)]


class DailyRecordFields(BaseModel):
    studentId: RequiredText

    # Date and weekday, as displayed (Hijri calendar, free text)
    hijriDate: RequiredText
    day: RequiredText

    # Memorization and review
    dailyLesson: OptionalText = Field(default=None, description="Surah name of the day's lesson.")
    lessonFromVerse: Optional[int] = Field(default=None, ge=1)
    lessonToVerse: Optional[int] = Field(default=None, ge=1)
    lastFivePages: OptionalText = None
    dailyReview: OptionalText = None
    reviewFrom: OptionalText = None
    reviewTo: OptionalText = None
    pageCount: Optional[int] = Field(default=None, ge=0)
    errors: OptionalText = None
    reminders: OptionalText = None
    listenerName: OptionalText = None

    # Evaluation and behavior
    behavior: OptionalRating = None
    other: OptionalRating = None
    totalScore: Optional[int] = Field(default=None, ge=0)
    notes: OptionalText = None


class DailyRecordCreate(DailyRecordFields):
    teacherId: RequiredText


class DailyRecordUpdate(BaseModel):
    studentId: Optional[RequiredText] = None
    teacherId: Optional[RequiredText] = None
    hijriDate: Optional[RequiredText] = None
    day: Optional[RequiredText] = None
    dailyLesson: OptionalText = None
    lessonFromVerse: Optional[int] = Field(default=None, ge=1)
    lessonToVerse: Optional[int] = Field(default=None, ge=1)
    lastFivePages: OptionalText = None
    dailyReview: OptionalText = None
    reviewFrom: OptionalText = None
    reviewTo: OptionalText = None
    pageCount: Optional[int] = Field(default=None, ge=0)
    errors: OptionalText = None
    reminders: OptionalText = None
    listenerName: OptionalText = None
    behavior: OptionalRating = None
    other: OptionalRating = None
    totalScore: Optional[int] = Field(default=None, ge=0)
    notes: OptionalText = None

    @model_validator(mode="before")
    @classmethod
    def _required_fields_not_null(cls, values):
        return reject_explicit_null(values, ("studentId", "teacherId", "hijriDate", "day"))


class DailyRecord(DailyRecordCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    createdAt: Optional[datetime] = None
