# /app/services/dashboard_service.py

# --- Core Imports ---
from ..db.models.account_models import Account
from ..models.account_model import Role
from ..models.classroom_model import ClassroomSummary
from ..models.common_model import ClassroomRef, SubjectRef
from ..models.dashboard_model import CatalogueCounts, DashboardSummary, TeachingAssignment
from .catalogue_helpers import references
from .database_service import DatabaseService

# --- Core Public Function ---

def get_summary_data(account: Account, db: DatabaseService) -> DashboardSummary:
    """
    Builds the home-page summary for the calling account.

    Args:
        account: The authenticated account, resolved from the bearer token.
        db: An instance of the DatabaseService, provided by dependency injection.

    Returns:
        A DashboardSummary whose populated section depends on the role:
        catalogue totals for an Admin, enrolled classrooms for a Student and
        (subject, classroom) teaching assignments for a Faculty member.
    """
    role = Role(account.role)

    if role == Role.ADMIN:
        counts = CatalogueCounts(
            classroomCount=db.count_classrooms(),
            subjectCount=db.count_subjects(),
            studentCount=db.count_accounts_by_role(Role.STUDENT.value),
            facultyCount=db.count_accounts_by_role(Role.FACULTY.value),
        )
        return DashboardSummary(role=role, counts=counts)

    if role == Role.STUDENT:
        enrolled_in = [c for c in db.get_all_classrooms() if account.id in (c.students or [])]
        live = references.live_enrolments(enrolled_in, db)
        classrooms = [
            ClassroomSummary(id=c.id, name=c.name, capacity=c.capacity, studentCount=len(live[c.id]))
            for c in enrolled_in
        ]
        return DashboardSummary(role=role, classrooms=classrooms)

    subjects = db.get_all_subjects()
    pairs = [
        (subject, pair["classroom"])
        for subject in subjects
        for pair in (subject.classrooms or [])
        if pair["faculty"] == account.id
    ]
    classrooms_by_id = db.get_classrooms_by_ids(classroom_id for _, classroom_id in pairs)
    assignments = [
        TeachingAssignment(
            subject=SubjectRef.model_validate(subject),
            classroom=ClassroomRef.model_validate(classrooms_by_id[classroom_id]),
        )
        for subject, classroom_id in pairs
        if classroom_id in classrooms_by_id
    ]
    return DashboardSummary(role=role, assignments=assignments)
