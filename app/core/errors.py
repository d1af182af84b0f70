# /app/core/errors.py

"""
The error taxonomy shared by every service in the backend.

Services raise these exceptions; the handlers registered in `app.main` turn
each one into a JSON body of the form `{"message": ...}` with the status code
the exception carries. Routers never build error responses by hand.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from fastapi import status


class AppError(Exception):
    """Base class for every error that maps onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, headers: Optional[Dict[str, str]] = None):
        self.message = message or self.default_message
        self.headers = headers
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed, missing or duplicate input. The client must fix it and resend."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class InvalidCredentials(AppError):
    """Login failed. Same message for unknown usernames and wrong passwords."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Incorrect username or password"


class Unauthenticated(AppError):
    """Missing, malformed, expired or stale bearer token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token. Please log in again."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "You do not have permission to perform this action"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"


# --- Validation Message Formatting ---
# Pydantic reports errors per field location; clients get one readable sentence.

FIELD_LABELS = {
    "firstName": "First name",
    "lastName": "Last name",
    "middleName": "Middle name",
    "username": "Username",
    "password": "Password",
    "role": "Role",
    "studentId": "Student ID",
    "year": "Year",
    "course": "Course",
    "facultyId": "Faculty ID",
    "faculty": "Faculty",
    "name": "Name",
    "capacity": "Capacity",
    "code": "Subject code",
    "credits": "Credits",
    "studentIds": "Student IDs",
    "classroomId": "Classroom ID",
}

FIELD_CONSTRAINT_MESSAGES = {
    "year": "Year must be one of 1, 2, 3, 4",
    "capacity": "Capacity must be a positive whole number",
    "credits": "Credits must be a positive whole number",
    "studentIds": "Student IDs must be a non-empty list of account IDs",
}

ROLE_TAG_ERRORS = {"union_tag_invalid", "union_tag_not_found"}
BODY_SHAPE_ERRORS = {"model_attributes_type", "dict_type", "model_type", "json_invalid", "json_type"}


def _field_name(loc: Iterable[Any]) -> Optional[str]:
    names = [part for part in loc if isinstance(part, str) and part != "body"]
    return names[-1] if names else None


def describe_validation_error(error: Mapping[str, Any]) -> str:
    """Renders a single pydantic error dict as a client-facing sentence."""
    error_type = error.get("type", "")
    if error_type in ROLE_TAG_ERRORS:
        return "Invalid role specified"

    field = _field_name(error.get("loc", ()))
    if field is None or field in {"Student", "Faculty", "Admin"}:
        if error_type in BODY_SHAPE_ERRORS or error_type == "missing":
            return "Request body must be a JSON object"
        return str(error.get("msg", "Invalid request"))

    label = FIELD_LABELS.get(field, field)
    min_length = (error.get("ctx") or {}).get("min_length")

    if error_type == "missing":
        return f"{label} is required"
    if error_type == "string_too_short" and min_length in (None, 1):
        return f"{label} is required"
    if field in FIELD_CONSTRAINT_MESSAGES:
        return FIELD_CONSTRAINT_MESSAGES[field]
    if error_type == "string_too_short":
        return f"{label} must be at least {min_length} characters"
    if error_type == "value_error":
        return str(error.get("msg", "")).removeprefix("Value error, ")
    return f"{label}: {error.get('msg', 'invalid value')}"


def describe_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Returns the message for the first failing field."""
    for error in errors:
        return describe_validation_error(error)
    return "Invalid request"
