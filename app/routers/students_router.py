# /halaqat-backend/app/routers/students_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..core import messages
from ..models import common, quran_error_model, record_model, report_model, student_model
from ..services import quran_error_service, record_service, report_service, student_service
from ..services.database_helpers.base_repository import BaseRepository
from ..services.database_service import get_db_service

router = APIRouter()

# --- STUDENT COLLECTION ENDPOINTS (/api/students) ---

@router.get("", response_model=List[student_model.Student], summary="Get All Students")
def get_all_students(db: BaseRepository = Depends(get_db_service)):
    return student_service.list_all_students(db=db)

# --- INDIVIDUAL STUDENT RESOURCE ENDPOINTS (/api/students/{student_id}) ---

@router.get("/{student_id}", response_model=student_model.Student, summary="Get a Single Student")
def get_student(student_id: str, db: BaseRepository = Depends(get_db_service)):
    student = student_service.get_student(student_id=student_id, db=db)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.STUDENT_NOT_FOUND)
    return student

@router.put("/{student_id}", response_model=student_model.Student, summary="Update a Student")
def update_student(student_id: str, student_update: student_model.StudentUpdate, db: BaseRepository = Depends(get_db_service)):
    try:
        updated_student = student_service.update_student(student_id=student_id, student_update=student_update, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated_student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.STUDENT_NOT_FOUND)
    return updated_student

@router.delete("/{student_id}", response_model=common.MessageResponse, summary="Delete a Student")
def delete_student(student_id: str, db: BaseRepository = Depends(get_db_service)):
    was_deleted = student_service.delete_student(student_id=student_id, db=db)
    if not was_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.STUDENT_NOT_FOUND)
    return common.MessageResponse(message=messages.STUDENT_DELETED)

# --- SUB-RESOURCE ENDPOINTS ---

@router.get("/{student_id}/records", response_model=List[record_model.DailyRecord], summary="Get a Student's Daily Records")
def get_student_records(student_id: str, db: BaseRepository = Depends(get_db_service)):
    return record_service.list_records_for_student(student_id=student_id, db=db)

@router.get("/{student_id}/quran-errors", response_model=List[quran_error_model.QuranError], summary="Get a Student's Verse Marks")
def get_student_quran_errors(student_id: str, db: BaseRepository = Depends(get_db_service)):
    return quran_error_service.list_errors_for_student(student_id=student_id, db=db)

@router.delete("/{student_id}/quran-errors", response_model=quran_error_model.PageClearResponse, summary="Clear a Page of Verse Marks")
def clear_page_errors(
    student_id: str,
    page_number: int = Query(..., alias="pageNumber", ge=1),
    db: BaseRepository = Depends(get_db_service),
):
    deleted = quran_error_service.clear_page(student_id=student_id, page_number=page_number, db=db)
    return quran_error_model.PageClearResponse(deleted=deleted)

@router.get("/{student_id}/report", response_model=report_model.StudentReport, summary="Get a Student's Progress Report")
def get_student_report(student_id: str, db: BaseRepository = Depends(get_db_service)):
    report = report_service.build_student_report(student_id=student_id, db=db)
    if report is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.STUDENT_NOT_FOUND)
    return report
