# /halaqat-backend/app/models/student_model.py

# --- Core Imports ---
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from typing_extensions import Annotated

from .common import OptionalText, RequiredText, reject_explicit_null


class StudentLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# The teacher-facing forms submit the Arabic labels; storage always holds
# the English values.
ARABIC_LEVEL_LABELS = {
    "مبتدئ": StudentLevel.BEGINNER.value,
    "متوسط": StudentLevel.INTERMEDIATE.value,
    "متقدم": StudentLevel.ADVANCED.value,
}


def normalize_level(value):
    if isinstance(value, StudentLevel):
        return value
    if isinstance(value, str):
        value = value.strip()
        return ARABIC_LEVEL_LABELS.get(value, value.lower())
    return value


Level = Annotated[StudentLevel, BeforeValidator(normalize_level)]


# --- Model Definitions ---

class StudentFields(BaseModel):
    """
    The student fields a teacher fills in. The owning teacher is not part of
    the form: it comes from the URL the form is posted to.
    """
    name: RequiredText = Field(..., description="The full name of the student.")
    age: int = Field(..., gt=0)
    phone: OptionalText = None
    level: Level
    parentId: OptionalText = Field(default=None, description="The parent account linked to this student, if any.")


class StudentCreate(StudentFields):
    """The complete insert payload, owner included."""
    teacherId: RequiredText


class StudentUpdate(BaseModel):
    """
    Partial update. Omitted fields stay untouched; `phone` and `parentId`
    may be cleared with null, the other fields may not.
    """
    name: Optional[RequiredText] = None
    age: Optional[int] = Field(default=None, gt=0)
    phone: OptionalText = None
    level: Optional[Level] = None
    teacherId: Optional[RequiredText] = None
    parentId: OptionalText = None

    @model_validator(mode="before")
    @classmethod
    def _required_fields_not_null(cls, values):
        return reject_explicit_null(values, ("name", "age", "level", "teacherId"))


class Student(StudentCreate):
    """
    The full representation of a Student resource, as it is stored and
    returned by the API.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="The unique, server-generated identifier for the student.")
    createdAt: Optional[datetime] = None
