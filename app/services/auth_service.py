# /app/services/auth_service.py

"""
The access-control gate: token issuance, login, token verification and role
checks.

Tokens are stateless. Nothing is stored server-side when a token is issued; a
token stays valid until it expires, unless the account it names has been
deleted, in which case verification rejects it.
"""

import logging
from typing import Iterable, Optional, Tuple

import jwt

from ..core import errors, security
from ..db.models.account_models import Account
from ..models import account_model
from . import identity_service
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

NOT_LOGGED_IN_MESSAGE = "You are not logged in. Please log in to get access."
INVALID_TOKEN_MESSAGE = "Invalid token. Please log in again."
STALE_ACCOUNT_MESSAGE = "The user belonging to this token no longer exists."
ADMIN_ONLY_MESSAGE = "Access denied. Admin only."


def issue_token(account_id: str) -> str:
    return security.create_access_token(subject=account_id)


def authenticate(db: DatabaseService, username: Optional[str], password: Optional[str]) -> Tuple[object, str]:
    """
    Checks a username/password pair and returns (account, token).

    The same InvalidCredentials error is raised for an unknown username and for
    a wrong password, and both paths run one bcrypt comparison.
    """
    if not username or not username.strip() or not password:
        raise errors.ValidationError("Please provide username and password")

    account = identity_service.find_by_username(db, username.strip())
    if account is None:
        security.verify_password(password, security.dummy_password_hash())
        logger.info("Login failed: unknown username")
        raise errors.InvalidCredentials()

    if not identity_service.verify_credential(account, password):
        logger.info("Login failed: wrong password for account %s", account.id)
        raise errors.InvalidCredentials()

    return account_model.to_account_out(account), issue_token(account.id)


def verify_token(db: DatabaseService, token: Optional[str]) -> Account:
    """Resolves a bearer token to the live account it names, or raises Unauthenticated."""
    if not token:
        raise errors.Unauthenticated(NOT_LOGGED_IN_MESSAGE)

    try:
        payload = security.decode_access_token(token)
    except jwt.InvalidTokenError as exc:
        logger.info("Rejected bearer token: %s", exc.__class__.__name__)
        raise errors.Unauthenticated(INVALID_TOKEN_MESSAGE)

    account_id = payload.get("sub")
    if not isinstance(account_id, str) or not account_id:
        raise errors.Unauthenticated(INVALID_TOKEN_MESSAGE)

    account = identity_service.find_by_id(db, account_id)
    if account is None:
        logger.info("Rejected bearer token for missing account %s", account_id)
        raise errors.Unauthenticated(STALE_ACCOUNT_MESSAGE)
    return account


def authorize(account: Account, allowed_roles: Iterable[account_model.Role]) -> None:
    """Raises Forbidden unless the account's role is one of `allowed_roles`."""
    allowed = {account_model.Role(role) for role in allowed_roles}
    if account_model.Role(account.role) in allowed:
        return

    logger.warning("Forbidden: account %s with role %s (allowed: %s)", account.id, account.role, sorted(r.value for r in allowed))
    if allowed == {account_model.Role.ADMIN}:
        raise errors.Forbidden(ADMIN_ONLY_MESSAGE)
    raise errors.Forbidden()
