# /app/services/database_helpers/classroom_subject_repository_sql.py

"""
Raw SQLAlchemy queries for the `classrooms` and `subjects` tables.

The JSON reference lists (`students`, `subjects`, `classrooms`) are always
written as fresh lists. SQLAlchemy does not track in-place mutation of a JSON
value, so callers hand complete replacement lists to `update_*`.
"""

import logging
from typing import Dict, Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core import errors
from app.db.models.classroom_subject_models import Classroom, Subject

logger = logging.getLogger(__name__)


def _commit_or_reject(db: Session, message: str) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Write rejected by a unique constraint: %s", message)
        raise errors.ValidationError(message)


class ClassroomRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_all_classrooms(self) -> List[Classroom]:
        return self.db.query(Classroom).order_by(Classroom.createdAt.asc(), Classroom.name.asc()).all()

    def get_classroom_by_id(self, classroom_id: str) -> Optional[Classroom]:
        return self.db.query(Classroom).filter(Classroom.id == classroom_id).first()

    def get_classroom_by_name(self, name: str) -> Optional[Classroom]:
        return self.db.query(Classroom).filter(Classroom.name == name).first()

    def get_classrooms_by_ids(self, classroom_ids: Iterable[str]) -> Dict[str, Classroom]:
        ids = list(set(classroom_ids))
        if not ids:
            return {}
        rows = self.db.query(Classroom).filter(Classroom.id.in_(ids)).all()
        return {row.id: row for row in rows}

    def count_classrooms(self) -> int:
        return self.db.query(func.count(Classroom.id)).scalar() or 0

    def add_classroom(self, record: Dict) -> Classroom:
        new_classroom = Classroom(**record)
        self.db.add(new_classroom)
        _commit_or_reject(self.db, "Classroom already exists")
        self.db.refresh(new_classroom)
        return new_classroom

    def update_classroom(self, classroom_id: str, data: Dict) -> Optional[Classroom]:
        db_classroom = self.get_classroom_by_id(classroom_id)
        if db_classroom:
            for key, value in data.items():
                setattr(db_classroom, key, value)
            _commit_or_reject(self.db, "Classroom already exists")
            self.db.refresh(db_classroom)
        return db_classroom

    def delete_classroom(self, classroom_id: str) -> bool:
        db_classroom = self.get_classroom_by_id(classroom_id)
        if db_classroom:
            self.db.delete(db_classroom)
            self.db.commit()
            return True
        return False


class SubjectRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_all_subjects(self) -> List[Subject]:
        return self.db.query(Subject).order_by(Subject.createdAt.asc(), Subject.code.asc()).all()

    def get_subject_by_id(self, subject_id: str) -> Optional[Subject]:
        return self.db.query(Subject).filter(Subject.id == subject_id).first()

    def get_subject_by_code(self, code: str) -> Optional[Subject]:
        return self.db.query(Subject).filter(Subject.code == code).first()

    def get_subjects_by_ids(self, subject_ids: Iterable[str]) -> Dict[str, Subject]:
        ids = list(set(subject_ids))
        if not ids:
            return {}
        rows = self.db.query(Subject).filter(Subject.id.in_(ids)).all()
        return {row.id: row for row in rows}

    def count_subjects(self) -> int:
        return self.db.query(func.count(Subject.id)).scalar() or 0

    def add_subject(self, record: Dict) -> Subject:
        new_subject = Subject(**record)
        self.db.add(new_subject)
        _commit_or_reject(self.db, "Subject with this code already exists")
        self.db.refresh(new_subject)
        return new_subject

    def update_subject(self, subject_id: str, data: Dict) -> Optional[Subject]:
        db_subject = self.get_subject_by_id(subject_id)
        if db_subject:
            for key, value in data.items():
                setattr(db_subject, key, value)
            _commit_or_reject(self.db, "Subject with this code already exists")
            self.db.refresh(db_subject)
        return db_subject

    def delete_subject(self, subject_id: str) -> bool:
        db_subject = self.get_subject_by_id(subject_id)
        if db_subject:
            self.db.delete(db_subject)
            self.db.commit()
            return True
        return False
