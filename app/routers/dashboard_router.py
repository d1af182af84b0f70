# /app/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends

# --- Service and Model Imports ---
from ..core.deps import get_current_account
from ..db.models.account_models import Account
from ..models.dashboard_model import DashboardSummary
from ..services import dashboard_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

# --- Endpoint Definition ---
@router.get(
    "/summary",
    response_model=DashboardSummary,
    summary="Get Dashboard Summary",
    description="Role-scoped home page data: totals for administrators, enrolled classrooms for students, teaching assignments for faculty."
)
def get_dashboard_summary(
    db: DatabaseService = Depends(get_db_service),
    current_account: Account = Depends(get_current_account),
):
    # Thin router: the role decides what the service assembles.
    return dashboard_service.get_summary_data(account=current_account, db=db)
