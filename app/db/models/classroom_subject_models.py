# /app/db/models/classroom_subject_models.py

"""
SQLAlchemy models for classrooms and subjects.

Relations are weak: a classroom stores the ids of its enrolled students and its
(subject, faculty) pairs as JSON lists, and a subject stores its (classroom,
faculty) pairs the same way. There are no foreign keys; the services check that
referenced records exist when a reference is added.

JSON columns are replaced wholesale on every change (never mutated in place) so
SQLAlchemy notices the update.
"""

from sqlalchemy import Column, String, Integer, DateTime, JSON
from sqlalchemy.sql import func

from ..base_class import Base


class Classroom(Base):
    __tablename__ = "classrooms"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, unique=True, index=True, nullable=False)
    capacity = Column(Integer, nullable=False)
    description = Column(String, nullable=True)
    grade = Column(String, nullable=True)
    section = Column(String, nullable=True)

    # ["acc_...", ...] in enrolment order, no duplicates
    students = Column(JSON, nullable=False, default=list)
    # [{"subject": "sub_...", "faculty": "acc_..."}, ...]
    subjects = Column(JSON, nullable=False, default=list)

    createdAt = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class Subject(Base):
    __tablename__ = "subjects"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    code = Column(String, unique=True, index=True, nullable=False)
    description = Column(String, nullable=True)
    credits = Column(Integer, nullable=True)
    department = Column(String, nullable=True)

    # [{"classroom": "cls_...", "faculty": "acc_..."}, ...]
    classrooms = Column(JSON, nullable=False, default=list)

    createdAt = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
