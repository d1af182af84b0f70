# /app/models/subject_model.py

# --- Core Imports ---
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common_model import AccountRef, ClassroomRef, RequiredStr

# --- Model Definitions ---

class SubjectBase(BaseModel):
    name: RequiredStr
    code: RequiredStr = Field(..., description="Unique subject code, e.g. 'CS101'.")
    description: Optional[str] = None
    credits: Optional[int] = Field(default=None, gt=0)
    department: Optional[str] = None


class SubjectCreate(SubjectBase):
    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Data Structures", "code": "CS201", "credits": 4, "department": "Computer Science"}}
    )


class SubjectUpdate(BaseModel):
    name: Optional[RequiredStr] = None
    code: Optional[RequiredStr] = None
    description: Optional[str] = None
    credits: Optional[int] = Field(default=None, gt=0)
    department: Optional[str] = None


class SubjectClassroomAssignment(BaseModel):
    classroom: ClassroomRef
    faculty: AccountRef


class Subject(SubjectBase):
    id: str
    classrooms: List[SubjectClassroomAssignment] = Field(default_factory=list)
    createdAt: datetime


class AssignmentRequest(BaseModel):
    """Teach this subject in `classroomId`, taught by the Faculty account `facultyId`."""
    classroomId: RequiredStr
    facultyId: RequiredStr
