# /app/models/classroom_model.py

# --- Core Imports ---
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common_model import AccountRef, RequiredStr, SubjectRef

# --- Model Definitions ---

class ClassroomBase(BaseModel):
    """Fields an administrator supplies when creating a classroom."""
    name: RequiredStr = Field(..., description="Unique classroom name, e.g. 'Room101'.")
    capacity: int = Field(..., gt=0, description="Maximum number of enrolled students.")
    description: Optional[str] = None
    grade: Optional[str] = None
    section: Optional[str] = None


class ClassroomCreate(ClassroomBase):
    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Room101", "capacity": 30, "grade": "10", "section": "A"}}
    )


class ClassroomUpdate(BaseModel):
    """All fields optional for partial updates. Enrolment and assignments have their own endpoints."""
    name: Optional[RequiredStr] = None
    capacity: Optional[int] = Field(default=None, gt=0)
    description: Optional[str] = None
    grade: Optional[str] = None
    section: Optional[str] = None


class ClassroomSubjectAssignment(BaseModel):
    subject: SubjectRef
    faculty: AccountRef


class Classroom(ClassroomBase):
    """
    The full representation of a classroom as returned by the API, with the
    enrolled students and the (subject, faculty) pairs resolved to references.
    """
    id: str
    students: List[AccountRef] = Field(default_factory=list)
    subjects: List[ClassroomSubjectAssignment] = Field(default_factory=list)
    createdAt: datetime


class ClassroomSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    capacity: int
    studentCount: int


class EnrollmentRequest(BaseModel):
    studentIds: List[RequiredStr] = Field(..., min_length=1, description="Account ids of Student accounts to enrol.")
