# /halaqat-backend/app/routers/records_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..core import messages
from ..models import common, record_model
from ..services import record_service
from ..services.database_helpers.base_repository import BaseRepository
from ..services.database_service import get_db_service

router = APIRouter()


@router.post("", response_model=record_model.DailyRecord, status_code=status.HTTP_201_CREATED, summary="Create a Daily Record")
def create_record(record_data: record_model.DailyRecordCreate, db: BaseRepository = Depends(get_db_service)):
    new_record = record_service.create_record(record_data=record_data, db=db)
    if new_record is None:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=messages.RECORD_CREATE_FAILED)
    return new_record

@router.get("/{record_id}", response_model=record_model.DailyRecord, summary="Get a Single Daily Record")
def get_record(record_id: str, db: BaseRepository = Depends(get_db_service)):
    record = record_service.get_record(record_id=record_id, db=db)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.RECORD_NOT_FOUND)
    return record

@router.put("/{record_id}", response_model=record_model.DailyRecord, summary="Update a Daily Record")
def update_record(record_id: str, record_update: record_model.DailyRecordUpdate, db: BaseRepository = Depends(get_db_service)):
    try:
        updated_record = record_service.update_record(record_id=record_id, record_update=record_update, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated_record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.RECORD_NOT_FOUND)
    return updated_record

@router.delete("/{record_id}", response_model=common.MessageResponse, summary="Delete a Daily Record")
def delete_record(record_id: str, db: BaseRepository = Depends(get_db_service)):
    if not record_service.delete_record(record_id=record_id, db=db):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.RECORD_NOT_FOUND)
    return common.MessageResponse(message=messages.RECORD_DELETED)
