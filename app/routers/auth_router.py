# /halaqat-backend/app/routers/auth_router.py

"""
This module defines the login endpoints for teachers and parents.

There are no tokens or sessions: a successful login simply returns the
account without its password, and the client keeps it. A failed login
always gets the same 401 message, whichever half of the pair was wrong.
"""

from fastapi import APIRouter, Depends, HTTPException, status

# --- Application-specific Imports ---
from ..core import messages
from ..models.parent_model import ParentPublic
from ..models.teacher_model import LoginRequest, TeacherPublic
from ..services import auth_service
from ..services.database_helpers.base_repository import BaseRepository
from ..services.database_service import get_db_service

# --- Router Initialization ---
router = APIRouter()


def _invalid_credentials() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=messages.INVALID_CREDENTIALS,
    )


@router.post("/login", response_model=TeacherPublic, summary="Teacher Login")
def login_teacher(credentials: LoginRequest, db: BaseRepository = Depends(get_db_service)):
    teacher = auth_service.authenticate_teacher(credentials.username, credentials.password, db)
    if teacher is None:
        raise _invalid_credentials()
    return teacher


@router.post("/validate", response_model=TeacherPublic, summary="Validate Teacher Credentials")
def validate_teacher(credentials: LoginRequest, db: BaseRepository = Depends(get_db_service)):
    """
    Same credential check as `/login`, used by the client to re-check a
    stored session. It never provisions the default teachers.
    """
    teacher = auth_service.authenticate_teacher(
        credentials.username, credentials.password, db, provision_defaults=False
    )
    if teacher is None:
        raise _invalid_credentials()
    return teacher


@router.post("/parent-login", response_model=ParentPublic, summary="Parent Login")
def login_parent(credentials: LoginRequest, db: BaseRepository = Depends(get_db_service)):
    parent = auth_service.authenticate_parent(credentials.username, credentials.password, db)
    if parent is None:
        raise _invalid_credentials()
    return parent
