# /app/routers/subjects_router.py

from fastapi import APIRouter, Depends, status
from typing import List

from ..core.deps import get_current_account, require_admin
from ..models import subject_model
from ..models.common_model import MessageResponse
from ..services import subject_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

# --- SUBJECT COLLECTION ENDPOINTS (/subjects) ---

@router.get("", response_model=List[subject_model.Subject], summary="Get All Subjects")
def get_all_subjects(
    db: DatabaseService = Depends(get_db_service),
    current_account=Depends(get_current_account),
):
    return subject_service.get_all_subjects(db=db)

@router.post("", response_model=subject_model.Subject, status_code=status.HTTP_201_CREATED, summary="Create a Subject (Admin)")
def create_new_subject(
    subject_create: subject_model.SubjectCreate,
    db: DatabaseService = Depends(get_db_service),
    current_account=Depends(require_admin),
):
    return subject_service.create_subject(subject_data=subject_create, db=db)

# --- INDIVIDUAL SUBJECT RESOURCE ENDPOINTS (/subjects/{subject_id}) ---

@router.get("/{subject_id}", response_model=subject_model.Subject, summary="Get a Single Subject")
def get_subject_by_id(
    subject_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_account=Depends(get_current_account),
):
    return subject_service.get_subject_details_by_id(subject_id=subject_id, db=db)

@router.put("/{subject_id}", response_model=subject_model.Subject, summary="Update a Subject (Admin)")
def update_subject_details(
    subject_id: str,
    subject_update: subject_model.SubjectUpdate,
    db: DatabaseService = Depends(get_db_service),
    current_account=Depends(require_admin),
):
    return subject_service.update_subject(subject_id=subject_id, subject_update=subject_update, db=db)

@router.delete("/{subject_id}", response_model=MessageResponse, summary="Delete a Subject (Admin)")
def delete_subject(
    subject_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_account=Depends(require_admin),
):
    subject_service.delete_subject_by_id(subject_id=subject_id, db=db)
    return MessageResponse(message="Subject deleted successfully")

# --- FACULTY ASSIGNMENT ---

@router.post("/{subject_id}/assign", response_model=subject_model.Subject, summary="Assign Faculty to Teach a Subject in a Classroom (Admin)")
def assign_faculty_to_subject(
    subject_id: str,
    assignment: subject_model.AssignmentRequest,
    db: DatabaseService = Depends(get_db_service),
    current_account=Depends(require_admin),
):
    return subject_service.assign_faculty(subject_id=subject_id, assignment=assignment, db=db)
