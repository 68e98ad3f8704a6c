# /halaqat-backend/app/models/quran_error_model.py

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import RequiredText


class ErrorType(str, Enum):
    REPEATED = "repeated"
    PREVIOUS = "previous"  # previously corrected


class QuranErrorCreate(BaseModel):
    studentId: RequiredText
    surah: RequiredText
    verse: int = Field(..., ge=1)
    pageNumber: int = Field(..., ge=1)
    errorType: ErrorType
    position: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Word or phrase offsets inside the verse, for sub-verse highlighting.",
    )


class QuranError(QuranErrorCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    createdAt: Optional[datetime] = None


class QuranErrorToggleResponse(BaseModel):
    action: str  # 'added' or 'removed'
    error: QuranError


class PageClearResponse(BaseModel):
    deleted: int
