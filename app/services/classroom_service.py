# /app/services/classroom_service.py

"""
Business logic for classrooms: CRUD, student enrolment and roster export.

Role checks happen before any of these functions run (see `app.core.deps`);
this module only enforces the classroom rules themselves:

- classroom names are unique;
- enrolment is a duplicate-free list of Student account ids, never larger than
  the classroom's capacity;
- deleting a classroom also removes the (classroom, faculty) pairs that point
  at it from every subject.
"""

import logging
import uuid
from typing import List, Tuple

import pandas as pd

from ..core import errors
from ..models import classroom_model
from ..models.account_model import Role
from .catalogue_helpers import references
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

CLASSROOM_NOT_FOUND = "Classroom not found"
ROSTER_COLUMNS = ["Student ID", "First Name", "Last Name", "Username", "Year", "Course", "Classroom"]


def _get_classroom_or_404(classroom_id: str, db: DatabaseService):
    classroom = db.get_classroom_by_id(classroom_id)
    if classroom is None:
        raise errors.NotFound(CLASSROOM_NOT_FOUND)
    return classroom


# --- CRUD ---

def create_classroom(class_data: classroom_model.ClassroomCreate, db: DatabaseService) -> classroom_model.Classroom:
    if db.get_classroom_by_name(class_data.name):
        raise errors.ValidationError("Classroom already exists")

    classroom_record = class_data.model_dump()
    classroom_record["id"] = f"cls_{uuid.uuid4().hex[:12]}"
    classroom_record["students"] = []
    classroom_record["subjects"] = []

    new_classroom = db.add_classroom(classroom_record)
    logger.info("Created classroom %s (%s)", new_classroom.id, new_classroom.name)
    return references.populate_classroom(new_classroom, db)


def get_all_classrooms(db: DatabaseService) -> List[classroom_model.Classroom]:
    return references.populate_classrooms(db.get_all_classrooms(), db)


def get_classroom_details_by_id(classroom_id: str, db: DatabaseService) -> classroom_model.Classroom:
    return references.populate_classroom(_get_classroom_or_404(classroom_id, db), db)


def update_classroom(
    classroom_id: str,
    class_update: classroom_model.ClassroomUpdate,
    db: DatabaseService
) -> classroom_model.Classroom:
    """
    Applies a partial update to the scalar fields of a classroom.
    Students and subject assignments are not touched here.
    """
    update_data = class_update.model_dump(exclude_unset=True)
    if not update_data:
        raise errors.ValidationError("No update data provided.")
    for field, label in (("name", "Name"), ("capacity", "Capacity")):
        if field in update_data and update_data[field] is None:
            raise errors.ValidationError(f"{label} cannot be empty")

    classroom = _get_classroom_or_404(classroom_id, db)

    new_name = update_data.get("name")
    if new_name is not None and new_name != classroom.name:
        existing = db.get_classroom_by_name(new_name)
        if existing is not None and existing.id != classroom.id:
            raise errors.ValidationError("Classroom already exists")

    new_capacity = update_data.get("capacity")
    if new_capacity is not None and new_capacity < len(references.live_enrolments([classroom], db)[classroom.id]):
        raise errors.ValidationError("Capacity cannot be lower than the number of enrolled students")

    updated = db.update_classroom(classroom_id, update_data)
    logger.info("Updated classroom %s (fields: %s)", classroom_id, ", ".join(sorted(update_data)))
    return references.populate_classroom(updated, db)


def delete_classroom_by_id(classroom_id: str, db: DatabaseService) -> None:
    _get_classroom_or_404(classroom_id, db)

    for subject in db.get_all_subjects():
        remaining = [pair for pair in (subject.classrooms or []) if pair["classroom"] != classroom_id]
        if len(remaining) != len(subject.classrooms or []):
            db.update_subject(subject.id, {"classrooms": remaining})

    db.delete_classroom(classroom_id)
    logger.info("Deleted classroom %s", classroom_id)


# --- Enrolment ---

def enroll_students(classroom_id: str, student_ids: List[str], db: DatabaseService) -> classroom_model.Classroom:
    """
    Adds Student accounts to a classroom. Ids already enrolled, or repeated in
    the request, are kept only once; the existing order is preserved. Ids of
    deleted accounts are dropped from the stored list and free their seat.
    """
    classroom = _get_classroom_or_404(classroom_id, db)

    accounts = db.get_accounts_by_ids(student_ids)
    for student_id in student_ids:
        account = accounts.get(student_id)
        if account is None or account.role != Role.STUDENT.value:
            raise errors.NotFound(f"Student with ID {student_id} not found")

    current = references.live_enrolments([classroom], db)[classroom.id]
    enrolled = list(dict.fromkeys(current + list(student_ids)))
    if len(enrolled) > classroom.capacity:
        raise errors.ValidationError("Classroom capacity exceeded")

    updated = db.update_classroom(classroom_id, {"students": enrolled})
    logger.info("Classroom %s now has %d enrolled students", classroom_id, len(enrolled))
    return references.populate_classroom(updated, db)


def remove_student_from_classroom(classroom_id: str, student_id: str, db: DatabaseService) -> classroom_model.Classroom:
    classroom = _get_classroom_or_404(classroom_id, db)

    enrolled = list(classroom.students or [])
    if student_id not in enrolled:
        raise errors.NotFound(f"Student with ID {student_id} is not enrolled in this classroom")

    enrolled.remove(student_id)
    updated = db.update_classroom(classroom_id, {"students": enrolled})
    logger.info("Removed student %s from classroom %s", student_id, classroom_id)
    return references.populate_classroom(updated, db)


# --- Export ---

def export_roster_as_csv(classroom_id: str, db: DatabaseService) -> Tuple[str, str]:
    """Returns (classroom name, CSV text) for the classroom's enrolled students."""
    classroom = _get_classroom_or_404(classroom_id, db)
    accounts = db.get_accounts_by_ids(classroom.students or [])

    export_data = [
        {
            "Student ID": accounts[sid].studentId,
            "First Name": accounts[sid].firstName,
            "Last Name": accounts[sid].lastName,
            "Username": accounts[sid].username,
            "Year": accounts[sid].year,
            "Course": accounts[sid].course,
            "Classroom": classroom.name,
        }
        for sid in (classroom.students or [])
        if sid in accounts
    ]

    df = pd.DataFrame(export_data, columns=ROSTER_COLUMNS)
    return classroom.name, df.to_csv(index=False)
