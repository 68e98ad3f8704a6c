# /halaqat-backend/app/models/teacher_model.py

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import RequiredText


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class TeacherCreate(BaseModel):
    """Provisioning payload for a teacher account (seed scripts, bootstrap)."""
    username: RequiredText
    password: str = Field(..., min_length=1)
    name: RequiredText = Field(..., description="Display name shown to parents and students.")
    gender: Gender
    circleName: RequiredText = Field(..., description="The name of the teacher's study circle.")


class TeacherPublic(BaseModel):
    """A teacher as returned by the API. Never carries the password."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    name: str
    gender: Gender
    circleName: str
    createdAt: Optional[datetime] = None


class Teacher(TeacherPublic):
    """A teacher exactly as stored, password included. Internal only."""
    password: str


class LoginRequest(BaseModel):
    username: RequiredText = Field(..., description="اسم المستخدم مطلوب")
    password: str = Field(..., min_length=1, description="كلمة المرور مطلوبة")
