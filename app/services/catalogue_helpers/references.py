# /app/services/catalogue_helpers/references.py

"""
Resolves the id lists stored on classrooms and subjects into the reference
objects the API returns.

Lookups are batched: one query per referenced table for a whole page of
classrooms or subjects. A reference whose target no longer exists is left out
of the response; the stored id list itself is not modified by a read.
"""

from typing import Dict, Iterable, List

from ...db.models.classroom_subject_models import Classroom as ClassroomRecord
from ...db.models.classroom_subject_models import Subject as SubjectRecord
from ...models import classroom_model, subject_model
from ...models.common_model import AccountRef, ClassroomRef, SubjectRef
from ..database_service import DatabaseService


def _pairs(records: Iterable, attribute: str) -> Iterable[Dict]:
    for record in records:
        for pair in getattr(record, attribute) or []:
            yield pair


def live_enrolments(classrooms: Iterable[ClassroomRecord], db: DatabaseService) -> Dict[str, List[str]]:
    """Enrolled ids per classroom, keeping only ids whose account still exists."""
    classrooms = list(classrooms)
    accounts = db.get_accounts_by_ids(sid for c in classrooms for sid in (c.students or []))
    return {c.id: [sid for sid in (c.students or []) if sid in accounts] for c in classrooms}


def populate_classrooms(classrooms: List[ClassroomRecord], db: DatabaseService) -> List[classroom_model.Classroom]:
    account_ids = [student_id for c in classrooms for student_id in (c.students or [])]
    account_ids += [pair["faculty"] for pair in _pairs(classrooms, "subjects")]
    accounts = db.get_accounts_by_ids(account_ids)
    subjects = db.get_subjects_by_ids(pair["subject"] for pair in _pairs(classrooms, "subjects"))

    populated = []
    for c in classrooms:
        students = [AccountRef.model_validate(accounts[sid]) for sid in (c.students or []) if sid in accounts]
        assignments = [
            classroom_model.ClassroomSubjectAssignment(
                subject=SubjectRef.model_validate(subjects[pair["subject"]]),
                faculty=AccountRef.model_validate(accounts[pair["faculty"]]),
            )
            for pair in (c.subjects or [])
            if pair["subject"] in subjects and pair["faculty"] in accounts
        ]
        populated.append(classroom_model.Classroom(
            id=c.id,
            name=c.name,
            capacity=c.capacity,
            description=c.description,
            grade=c.grade,
            section=c.section,
            students=students,
            subjects=assignments,
            createdAt=c.createdAt,
        ))
    return populated


def populate_classroom(classroom: ClassroomRecord, db: DatabaseService) -> classroom_model.Classroom:
    return populate_classrooms([classroom], db)[0]


def populate_subjects(subjects: List[SubjectRecord], db: DatabaseService) -> List[subject_model.Subject]:
    pairs = list(_pairs(subjects, "classrooms"))
    accounts = db.get_accounts_by_ids(pair["faculty"] for pair in pairs)
    classrooms = db.get_classrooms_by_ids(pair["classroom"] for pair in pairs)

    populated = []
    for s in subjects:
        assignments = [
            subject_model.SubjectClassroomAssignment(
                classroom=ClassroomRef.model_validate(classrooms[pair["classroom"]]),
                faculty=AccountRef.model_validate(accounts[pair["faculty"]]),
            )
            for pair in (s.classrooms or [])
            if pair["classroom"] in classrooms and pair["faculty"] in accounts
        ]
        populated.append(subject_model.Subject(
            id=s.id,
            name=s.name,
            code=s.code,
            description=s.description,
            credits=s.credits,
            department=s.department,
            classrooms=assignments,
            createdAt=s.createdAt,
        ))
    return populated


def populate_subject(subject: SubjectRecord, db: DatabaseService) -> subject_model.Subject:
    return populate_subjects([subject], db)[0]
