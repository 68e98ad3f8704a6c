# /halaqat-backend/app/models/parent_model.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import OptionalText, RequiredText


class ParentCreate(BaseModel):
    username: RequiredText
    password: str = Field(..., min_length=1)
    fatherName: RequiredText
    motherName: OptionalText = None
    phone: RequiredText
    email: OptionalText = None


class ParentPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    fatherName: str
    motherName: Optional[str] = None
    phone: str
    email: Optional[str] = None
    createdAt: Optional[datetime] = None


class Parent(ParentPublic):
    password: str
