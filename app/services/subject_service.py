# /app/services/subject_service.py

"""
Business logic for subjects and faculty assignments.

An assignment says "this subject is taught in this classroom by this faculty
member". It is recorded on both sides: as a (classroom, faculty) pair on the
subject and as a (subject, faculty) pair on the classroom. The pair is unique
per subject.
"""

import logging
import uuid
from typing import List

from ..core import errors
from ..models import subject_model
from ..models.account_model import Role
from .catalogue_helpers import references
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

SUBJECT_NOT_FOUND = "Subject not found"


def _get_subject_or_404(subject_id: str, db: DatabaseService):
    subject = db.get_subject_by_id(subject_id)
    if subject is None:
        raise errors.NotFound(SUBJECT_NOT_FOUND)
    return subject


# --- CRUD ---

def create_subject(subject_data: subject_model.SubjectCreate, db: DatabaseService) -> subject_model.Subject:
    if db.get_subject_by_code(subject_data.code):
        raise errors.ValidationError("Subject with this code already exists")

    subject_record = subject_data.model_dump()
    subject_record["id"] = f"sub_{uuid.uuid4().hex[:12]}"
    subject_record["classrooms"] = []

    new_subject = db.add_subject(subject_record)
    logger.info("Created subject %s (%s)", new_subject.id, new_subject.code)
    return references.populate_subject(new_subject, db)


def get_all_subjects(db: DatabaseService) -> List[subject_model.Subject]:
    return references.populate_subjects(db.get_all_subjects(), db)


def get_subject_details_by_id(subject_id: str, db: DatabaseService) -> subject_model.Subject:
    return references.populate_subject(_get_subject_or_404(subject_id, db), db)


def update_subject(subject_id: str, subject_update: subject_model.SubjectUpdate, db: DatabaseService) -> subject_model.Subject:
    update_data = subject_update.model_dump(exclude_unset=True)
    if not update_data:
        raise errors.ValidationError("No update data provided.")
    for field, label in (("name", "Name"), ("code", "Subject code")):
        if field in update_data and update_data[field] is None:
            raise errors.ValidationError(f"{label} cannot be empty")

    subject = _get_subject_or_404(subject_id, db)

    new_code = update_data.get("code")
    if new_code is not None and new_code != subject.code:
        existing = db.get_subject_by_code(new_code)
        if existing is not None and existing.id != subject.id:
            raise errors.ValidationError("Subject with this code already exists")

    updated = db.update_subject(subject_id, update_data)
    logger.info("Updated subject %s (fields: %s)", subject_id, ", ".join(sorted(update_data)))
    return references.populate_subject(updated, db)


def delete_subject_by_id(subject_id: str, db: DatabaseService) -> None:
    _get_subject_or_404(subject_id, db)

    for classroom in db.get_all_classrooms():
        remaining = [pair for pair in (classroom.subjects or []) if pair["subject"] != subject_id]
        if len(remaining) != len(classroom.subjects or []):
            db.update_classroom(classroom.id, {"subjects": remaining})

    db.delete_subject(subject_id)
    logger.info("Deleted subject %s", subject_id)


# --- Assignment ---

def assign_faculty(
    subject_id: str,
    assignment: subject_model.AssignmentRequest,
    db: DatabaseService
) -> subject_model.Subject:
    subject = _get_subject_or_404(subject_id, db)

    classroom = db.get_classroom_by_id(assignment.classroomId)
    if classroom is None:
        raise errors.NotFound("Classroom not found")

    faculty = db.get_account_by_id(assignment.facultyId)
    if faculty is None or faculty.role != Role.FACULTY.value:
        raise errors.NotFound("Faculty not found")

    subject_pairs = list(subject.classrooms or [])
    new_pair = {"classroom": classroom.id, "faculty": faculty.id}
    if new_pair in subject_pairs:
        raise errors.ValidationError("Assignment already exists")

    classroom_pairs = list(classroom.subjects or [])
    mirrored_pair = {"subject": subject.id, "faculty": faculty.id}
    if mirrored_pair not in classroom_pairs:
        db.update_classroom(classroom.id, {"subjects": classroom_pairs + [mirrored_pair]})

    updated = db.update_subject(subject.id, {"classrooms": subject_pairs + [new_pair]})
    logger.info("Assigned faculty %s to subject %s in classroom %s", faculty.id, subject.id, classroom.id)
    return references.populate_subject(updated, db)
