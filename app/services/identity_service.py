# /app/services/identity_service.py

"""
Business logic for accounts: registration, credential checks and lookups.

Registration is the only way an account comes into existence. The role is
chosen at that moment and never changes afterwards. Uniqueness rules:

- `username` is unique across every role.
- `studentId` (Students) and `facultyId` (Faculty) are unique within their own
  column, independently of usernames.

The plaintext password is hashed here and then dropped. Callers outside the
service layer only ever see the response models from `account_model`, none of
which has a hash field.
"""

import logging
import uuid
from typing import Optional, Union

from ..core import errors, security
from ..db.models.account_models import Account
from ..models import account_model
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

# role -> (field, message) pairs that must not already be taken
ROLE_UNIQUE_FIELDS = {
    account_model.Role.STUDENT.value: [("studentId", "Student ID is already taken")],
    account_model.Role.FACULTY.value: [("facultyId", "Faculty ID is already taken")],
    account_model.Role.ADMIN.value: [],
}

AccountCreateModel = Union[account_model.StudentCreate, account_model.FacultyCreate, account_model.AdminCreate]


def _find_by_role_field(db: DatabaseService, field: str, value: str) -> Optional[Account]:
    if field == "studentId":
        return db.get_account_by_student_id(value)
    if field == "facultyId":
        return db.get_account_by_faculty_id(value)
    raise ValueError(f"No unique lookup for field {field!r}")


def create_account(db: DatabaseService, account_in: AccountCreateModel):
    """
    Registers a new account from an already-parsed role model.

    Raises errors.ValidationError when the username or the role-specific id is
    already taken. Returns the outward representation of the new account.
    """
    if db.get_account_by_username(account_in.username):
        raise errors.ValidationError("Username is already taken")

    for field, message in ROLE_UNIQUE_FIELDS[account_in.role]:
        if _find_by_role_field(db, field, getattr(account_in, field)):
            raise errors.ValidationError(message)

    account_record = account_in.model_dump(exclude={"password"})
    account_record["id"] = f"acc_{uuid.uuid4().hex[:12]}"
    account_record["password_hash"] = security.hash_password(account_in.password)

    new_account = db.add_account(account_record)
    logger.info("Registered %s account %s (username=%s)", new_account.role, new_account.id, new_account.username)
    return account_model.to_account_out(new_account)


def verify_credential(account: Account, plaintext_candidate: Optional[str]) -> bool:
    """True when the candidate matches the stored hash. A mismatch is never an error."""
    return security.verify_password(plaintext_candidate or "", account.password_hash)


def find_by_username(db: DatabaseService, username: str) -> Optional[Account]:
    return db.get_account_by_username(username)


def find_by_id(db: DatabaseService, account_id: str) -> Optional[Account]:
    return db.get_account_by_id(account_id)
