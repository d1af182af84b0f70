# /app/core/deps.py

"""
FastAPI dependencies that put the access-control gate in front of routes.

`get_current_account` resolves the bearer token on every protected request.
`require_roles(...)` builds a dependency that additionally checks the role;
`require_admin` is the one used by every classroom/subject mutation.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.db.models.account_models import Account
from app.models.account_model import Role
from app.services import auth_service
from app.services.database_service import DatabaseService, get_db_service

# auto_error=False: a missing header is reported through our own error taxonomy.
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_account(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: DatabaseService = Depends(get_db_service),
) -> Account:
    token = credentials.credentials if credentials else None
    return auth_service.verify_token(db, token)


def require_roles(*roles: Role):
    def role_checker(current_account: Account = Depends(get_current_account)) -> Account:
        auth_service.authorize(current_account, roles)
        return current_account

    return role_checker


require_admin = require_roles(Role.ADMIN)
