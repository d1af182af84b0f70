# /app/routers/classrooms_router.py

from fastapi import APIRouter, Depends, status
from fastapi.responses import StreamingResponse
from typing import List

from ..core.deps import get_current_account, require_admin, require_roles
from ..models import classroom_model
from ..models.account_model import Role
from ..models.common_model import MessageResponse
from ..services import classroom_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

# --- CLASSROOM COLLECTION ENDPOINTS (/classrooms) ---

@router.get("", response_model=List[classroom_model.Classroom], summary="Get All Classrooms")
def get_all_classrooms(
    db: DatabaseService = Depends(get_db_service),
    current_account=Depends(get_current_account),
):
    return classroom_service.get_all_classrooms(db=db)

@router.post("", response_model=classroom_model.Classroom, status_code=status.HTTP_201_CREATED, summary="Create a Classroom (Admin)")
def create_new_classroom(
    classroom_create: classroom_model.ClassroomCreate,
    db: DatabaseService = Depends(get_db_service),
    current_account=Depends(require_admin),
):
    return classroom_service.create_classroom(class_data=classroom_create, db=db)

# --- INDIVIDUAL CLASSROOM RESOURCE ENDPOINTS (/classrooms/{classroom_id}) ---

@router.get("/{classroom_id}", response_model=classroom_model.Classroom, summary="Get a Single Classroom")
def get_classroom_by_id(
    classroom_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_account=Depends(get_current_account),
):
    return classroom_service.get_classroom_details_by_id(classroom_id=classroom_id, db=db)

@router.put("/{classroom_id}", response_model=classroom_model.Classroom, summary="Update a Classroom (Admin)")
def update_classroom_details(
    classroom_id: str,
    classroom_update: classroom_model.ClassroomUpdate,
    db: DatabaseService = Depends(get_db_service),
    current_account=Depends(require_admin),
):
    return classroom_service.update_classroom(classroom_id=classroom_id, class_update=classroom_update, db=db)

@router.delete("/{classroom_id}", response_model=MessageResponse, summary="Delete a Classroom (Admin)")
def delete_classroom(
    classroom_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_account=Depends(require_admin),
):
    classroom_service.delete_classroom_by_id(classroom_id=classroom_id, db=db)
    return MessageResponse(message="Classroom deleted successfully")

@router.get(
    "/{classroom_id}/export",
    summary="Export Classroom Roster as CSV (Admin, Faculty)",
    response_class=StreamingResponse,
)
def export_classroom_roster_csv(
    classroom_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_account=Depends(require_roles(Role.ADMIN, Role.FACULTY)),
):
    classroom_name, csv_string = classroom_service.export_roster_as_csv(classroom_id=classroom_id, db=db)
    file_name = f"roster_{classroom_name.replace(' ', '_').lower()}.csv"
    return StreamingResponse(
        iter([csv_string]),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={file_name}"},
    )

# --- STUDENT ENROLMENT SUB-RESOURCE ENDPOINTS ---

@router.post("/{classroom_id}/students", response_model=classroom_model.Classroom, summary="Enrol Students in a Classroom (Admin)")
def add_students(
    classroom_id: str,
    enrollment: classroom_model.EnrollmentRequest,
    db: DatabaseService = Depends(get_db_service),
    current_account=Depends(require_admin),
):
    return classroom_service.enroll_students(classroom_id=classroom_id, student_ids=enrollment.studentIds, db=db)

@router.delete("/{classroom_id}/students/{student_id}", response_model=classroom_model.Classroom, summary="Remove a Student from a Classroom (Admin)")
def remove_student_from_classroom(
    classroom_id: str,
    student_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_account=Depends(require_admin),
):
    return classroom_service.remove_student_from_classroom(classroom_id=classroom_id, student_id=student_id, db=db)
