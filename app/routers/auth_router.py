# /app/routers/auth_router.py

"""
This module defines the public-facing API for all authentication-related actions.

It includes endpoints for:
- Account registration for any role (`/register`)
- Login and token issuance (`/login`)
- Retrieving the current account's profile (`/me`)

The handlers are plain `def` functions. FastAPI runs them on its worker thread
pool, which keeps the bcrypt work in registration and login off the event loop.
"""

from fastapi import APIRouter, Depends, status

# --- Application-specific Imports ---
from app.core.deps import get_current_account
from app.db.models.account_models import Account as AccountRecord
from app.models import account_model
from app.services import auth_service, identity_service
from app.services.database_service import DatabaseService, get_db_service

# --- Router Initialization ---
router = APIRouter()


@router.post(
    "/register",
    response_model=account_model.AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a Student, Faculty or Admin account",
)
def register_account(
    account_in: account_model.AccountCreateRequest,
    db: DatabaseService = Depends(get_db_service)
):
    """
    Creates the account described by the `role` field and returns it together
    with a freshly issued token. Validation and uniqueness failures come back
    as 400 with a `message`.
    """
    new_account = identity_service.create_account(db=db, account_in=account_in.root)
    return account_model.AuthResponse(token=auth_service.issue_token(new_account.id), account=new_account)


@router.post("/login", response_model=account_model.AuthResponse, summary="Log in and obtain a bearer token")
def login(
    credentials: account_model.LoginRequest,
    db: DatabaseService = Depends(get_db_service)
):
    account, token = auth_service.authenticate(db, username=credentials.username, password=credentials.password)
    return account_model.AuthResponse(token=token, account=account)


@router.get("/me", response_model=account_model.AccountOut, summary="Get the current account")
def read_current_account(
    current_account: AccountRecord = Depends(get_current_account)
):
    """Protected endpoint: requires a valid bearer token for an existing account."""
    return account_model.to_account_out(current_account)
