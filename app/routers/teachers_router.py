# /halaqat-backend/app/routers/teachers_router.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse

from ..core import messages
from ..models import dashboard_model, record_model, report_model, student_model, teacher_model
from ..services import (
    auth_service,
    dashboard_service,
    record_service,
    report_service,
    student_service,
)
from ..services.database_helpers.base_repository import BaseRepository
from ..services.database_service import get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()

# --- TEACHER COLLECTION ENDPOINTS (/api/teachers) ---

@router.get("", response_model=List[teacher_model.TeacherPublic], summary="Get All Teachers")
def get_all_teachers(db: BaseRepository = Depends(get_db_service)):
    return [auth_service.to_public_teacher(t) for t in db.get_all_teachers()]

# --- STUDENT SUB-RESOURCE ENDPOINTS ---

@router.get("/{teacher_id}/students", response_model=List[student_model.Student], summary="Get a Teacher's Students")
def get_teacher_students(teacher_id: str, db: BaseRepository = Depends(get_db_service)):
    return student_service.list_students_for_teacher(teacher_id=teacher_id, db=db)

@router.post("/{teacher_id}/students", response_model=student_model.Student, status_code=status.HTTP_201_CREATED, summary="Add a Student to a Teacher's Circle")
def add_student(teacher_id: str, student_data: student_model.StudentFields, db: BaseRepository = Depends(get_db_service)):
    new_student = student_service.add_student_to_teacher(teacher_id=teacher_id, student_data=student_data, db=db)
    if new_student is None:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=messages.STUDENT_CREATE_FAILED)
    return new_student

# --- DAILY RECORD SUB-RESOURCE ENDPOINTS ---

@router.get("/{teacher_id}/records", response_model=List[record_model.DailyRecord], summary="Get a Teacher's Daily Records")
def get_teacher_records(teacher_id: str, db: BaseRepository = Depends(get_db_service)):
    return record_service.list_records_for_teacher(teacher_id=teacher_id, db=db)

@router.post("/{teacher_id}/records", response_model=record_model.DailyRecord, status_code=status.HTTP_201_CREATED, summary="Add a Daily Record")
def add_record(teacher_id: str, record_data: record_model.DailyRecordFields, db: BaseRepository = Depends(get_db_service)):
    new_record = record_service.create_record_for_teacher(teacher_id=teacher_id, record_data=record_data, db=db)
    if new_record is None:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=messages.RECORD_CREATE_FAILED)
    return new_record

# --- DASHBOARD AND REPORT ENDPOINTS ---

@router.get("/{teacher_id}/summary", response_model=dashboard_model.DashboardSummary, summary="Get Dashboard Summary")
def get_dashboard_summary(teacher_id: str, db: BaseRepository = Depends(get_db_service)):
    summary = dashboard_service.get_summary_data(teacher_id=teacher_id, db=db)
    if summary is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.TEACHER_NOT_FOUND)
    return summary

@router.get("/{teacher_id}/report", response_model=report_model.TeacherReport, summary="Get the Circle Progress Report")
def get_teacher_report(teacher_id: str, db: BaseRepository = Depends(get_db_service)):
    try:
        report = report_service.build_teacher_report(teacher_id=teacher_id, db=db)
    except Exception:
        logger.exception("Failed to build report for teacher %s", teacher_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=messages.REPORT_FAILED)
    if report is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.TEACHER_NOT_FOUND)
    return report

@router.get("/{teacher_id}/report/export", summary="Export the Circle Progress Report as CSV", response_class=StreamingResponse)
def export_teacher_report_csv(teacher_id: str, db: BaseRepository = Depends(get_db_service)):
    try:
        csv_string = report_service.export_teacher_report_csv(teacher_id=teacher_id, db=db)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.TEACHER_NOT_FOUND)
    file_name = f"report_{teacher_id}.csv"
    return StreamingResponse(
        iter([csv_string]),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={file_name}"},
    )
