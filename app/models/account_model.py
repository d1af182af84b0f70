# /app/models/account_model.py

"""
Pydantic contracts for accounts.

Every account shares the same base fields; the `role` field is the
discriminator that selects the Student, Faculty or Admin variant. Request
models carry the plaintext password; response models never carry the password
or its hash.
"""

# --- Core Imports ---
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from ..core.security import BCRYPT_MAX_PASSWORD_BYTES
from .common_model import RequiredStr


# --- Core Enumerations ---
class Role(str, Enum):
    STUDENT = "Student"
    FACULTY = "Faculty"
    ADMIN = "Admin"


# --- Registration Models ---

class AccountCreateBase(BaseModel):
    firstName: RequiredStr
    lastName: RequiredStr
    middleName: Optional[str] = None
    username: RequiredStr
    password: str = Field(..., min_length=6, description="Plaintext password. Only its bcrypt hash is stored.")

    @field_validator("middleName")
    @classmethod
    def blank_middle_name_is_absent(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
        return value


class StudentCreate(AccountCreateBase):
    role: Literal["Student"]
    studentId: RequiredStr
    year: int = Field(..., ge=1, le=4, strict=True)
    course: RequiredStr


class FacultyCreate(AccountCreateBase):
    role: Literal["Faculty"]
    facultyId: RequiredStr
    faculty: RequiredStr


class AdminCreate(AccountCreateBase):
    role: Literal["Admin"]


AccountCreate = Annotated[Union[StudentCreate, FacultyCreate, AdminCreate], Field(discriminator="role")]


class AccountCreateRequest(RootModel[AccountCreate]):
    """Request body of POST /register. The `role` field selects the variant."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "role": "Student", "firstName": "Ada", "lastName": "Lovelace", "username": "ada",
                "password": "pass123", "studentId": "S-1001", "year": 2, "course": "Computer Science",
            }
        }
    )


# --- Response Models ---

class AccountBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    firstName: str
    lastName: str
    middleName: Optional[str] = None
    username: str
    createdAt: datetime


class StudentAccount(AccountBase):
    role: Literal["Student"]
    studentId: str
    year: int
    course: str


class FacultyAccount(AccountBase):
    role: Literal["Faculty"]
    facultyId: str
    faculty: str


class AdminAccount(AccountBase):
    role: Literal["Admin"]


Account = Annotated[Union[StudentAccount, FacultyAccount, AdminAccount], Field(discriminator="role")]

# Plain union for response_model declarations; each variant is a distinct class.
AccountOut = Union[StudentAccount, FacultyAccount, AdminAccount]

ROLE_OUTPUT_MODELS = {
    Role.STUDENT.value: StudentAccount,
    Role.FACULTY.value: FacultyAccount,
    Role.ADMIN.value: AdminAccount,
}


def to_account_out(record: Any) -> AccountOut:
    """Builds the outward representation of an ORM account. The hash is not a field of any variant."""
    return ROLE_OUTPUT_MODELS[record.role].model_validate(record)


# --- Authentication Models ---

class LoginRequest(BaseModel):
    # Optional so that a missing field yields the login-specific message.
    username: Optional[str] = None
    password: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "admin1", "password": "pass123"}}
    )


class AuthResponse(BaseModel):
    token: str
    tokenType: str = "bearer"
    account: Account
