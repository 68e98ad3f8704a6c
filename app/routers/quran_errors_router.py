# /halaqat-backend/app/routers/quran_errors_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends, HTTPException, status

# --- Service and Model Imports ---
from ..core import messages
from ..models import common, quran_error_model
from ..services import quran_error_service
from ..services.database_helpers.base_repository import BaseRepository
from ..services.database_service import get_db_service

router = APIRouter()


@router.post("", response_model=quran_error_model.QuranError, status_code=status.HTTP_201_CREATED, summary="Mark a Verse")
def create_quran_error(error_data: quran_error_model.QuranErrorCreate, db: BaseRepository = Depends(get_db_service)):
    new_error = quran_error_service.create_error(error_data=error_data, db=db)
    if new_error is None:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=messages.QURAN_ERROR_CREATE_FAILED)
    return new_error

@router.post("/toggle", response_model=quran_error_model.QuranErrorToggleResponse, summary="Mark or Un-mark a Verse")
def toggle_quran_error(error_data: quran_error_model.QuranErrorCreate, db: BaseRepository = Depends(get_db_service)):
    """
    The Quran viewer calls this on every tap: a verse already marked on
    that page is un-marked, otherwise it is marked.
    """
    result = quran_error_service.toggle_verse_error(error_data=error_data, db=db)
    if result is None:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=messages.QURAN_ERROR_CREATE_FAILED)
    action, error = result
    return quran_error_model.QuranErrorToggleResponse(action=action, error=error)

@router.delete("/{error_id}", response_model=common.MessageResponse, summary="Delete a Verse Mark")
def delete_quran_error(error_id: str, db: BaseRepository = Depends(get_db_service)):
    if not quran_error_service.delete_error(error_id=error_id, db=db):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.QURAN_ERROR_NOT_FOUND)
    return common.MessageResponse(message=messages.QURAN_ERROR_DELETED)
