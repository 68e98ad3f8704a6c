# /halaqat-backend/app/services/auth_service.py

"""
Login for teachers and parents.

A failed login never says whether the username or the password was wrong;
the router turns any None from here into the same 401 message.
"""

import logging
from typing import Optional

from ..models.parent_model import Parent, ParentPublic
from ..models.teacher_model import Teacher, TeacherPublic
from .database_helpers import seed_data
from .database_helpers.base_repository import BaseRepository

logger = logging.getLogger(__name__)


def to_public_teacher(teacher: Teacher) -> TeacherPublic:
    return TeacherPublic.model_validate(teacher.model_dump(exclude={"password"}))


def to_public_parent(parent: Parent) -> ParentPublic:
    return ParentPublic.model_validate(parent.model_dump(exclude={"password"}))


def authenticate_teacher(
    username: str,
    password: str,
    db: BaseRepository,
    provision_defaults: bool = True,
) -> Optional[TeacherPublic]:
    """
    Checks a teacher's credentials. With `provision_defaults`, a store that
    has no teachers at all first gets the default accounts (first login on
    a fresh deployment); the session re-check passes False.
    """
    logger.info("Login attempt for username: %s", username)

    if provision_defaults and not db.get_all_teachers():
        seed_data.ensure_teachers_exist(db)

    teacher = db.validate_teacher(username, password)
    if teacher is None:
        logger.info("Authentication failed for username: %s", username)
        return None

    logger.info("Authentication successful for teacher %s", teacher.id)
    return to_public_teacher(teacher)


def authenticate_parent(username: str, password: str, db: BaseRepository) -> Optional[ParentPublic]:
    parent = db.validate_parent(username, password)
    if parent is None:
        logger.info("Parent authentication failed for username: %s", username)
        return None
    return to_public_parent(parent)
