# /halaqat-backend/app/routers/parents_router.py

from typing import List

from fastapi import APIRouter, Depends

from ..models import parent_model, student_model
from ..services import auth_service, student_service
from ..services.database_helpers.base_repository import BaseRepository
from ..services.database_service import get_db_service

router = APIRouter()


@router.get("", response_model=List[parent_model.ParentPublic], summary="Get All Parents")
def get_all_parents(db: BaseRepository = Depends(get_db_service)):
    return [auth_service.to_public_parent(p) for p in db.get_all_parents()]

@router.get("/{parent_id}/students", response_model=List[student_model.Student], summary="Get a Parent's Children")
def get_parent_students(parent_id: str, db: BaseRepository = Depends(get_db_service)):
    return student_service.list_students_for_parent(parent_id=parent_id, db=db)
