# /app/models/dashboard_model.py

# --- Core Imports ---
from typing import List, Optional

from pydantic import BaseModel, Field

from .account_model import Role
from .classroom_model import ClassroomSummary
from .common_model import ClassroomRef, SubjectRef

# --- Model Definitions ---

class CatalogueCounts(BaseModel):
    """Totals shown on the administrator's home page."""
    classroomCount: int = Field(..., examples=[4])
    subjectCount: int = Field(..., examples=[12])
    studentCount: int = Field(..., examples=[112])
    facultyCount: int = Field(..., examples=[9])


class TeachingAssignment(BaseModel):
    subject: SubjectRef
    classroom: ClassroomRef


class DashboardSummary(BaseModel):
    """
    Defines the data contract for the dashboard summary endpoint. Only the
    section that matches the caller's role is filled in: `counts` for
    administrators, `classrooms` for students, `assignments` for faculty.
    """
    role: Role
    counts: Optional[CatalogueCounts] = None
    classrooms: List[ClassroomSummary] = Field(default_factory=list)
    assignments: List[TeachingAssignment] = Field(default_factory=list)
