# /tests/test_identity_service.py

import pytest

from app.core import errors
from app.models.account_model import (
    AdminAccount,
    FacultyAccount,
    StudentAccount,
)
from app.services import identity_service


def test_create_student_account(db_service, payloads, parse_account_create):
    """A Student registration stores the role fields and a bcrypt hash, never the password."""
    # Arrange
    account_in = parse_account_create(payloads["Student"])

    # Act
    created = identity_service.create_account(db_service, account_in)

    # Assert
    assert isinstance(created, StudentAccount)
    assert created.id.startswith("acc_")
    assert created.role == "Student"
    assert created.studentId == "S-1001"
    assert created.year == 2
    assert "password" not in created.model_dump()
    assert "password_hash" not in created.model_dump()

    stored = db_service.get_account_by_id(created.id)
    assert stored.password_hash != "pass123"
    assert stored.password_hash.startswith("$2b$")


def test_create_faculty_and_admin_accounts(db_service, payloads, parse_account_create):
    faculty = identity_service.create_account(db_service, parse_account_create(payloads["Faculty"]))
    admin = identity_service.create_account(db_service, parse_account_create(payloads["Admin"]))

    assert isinstance(faculty, FacultyAccount)
    assert faculty.facultyId == "F-2001"
    assert isinstance(admin, AdminAccount)
    assert faculty.id != admin.id


def test_blank_middle_name_is_stored_as_absent(db_service, payloads, parse_account_create):
    payload = dict(payloads["Admin"], middleName="   ")
    created = identity_service.create_account(db_service, parse_account_create(payload))
    assert created.middleName is None


def test_username_must_be_unique_across_roles(db_service, payloads, parse_account_create):
    identity_service.create_account(db_service, parse_account_create(payloads["Student"]))
    clash = dict(payloads["Faculty"], username=payloads["Student"]["username"])

    with pytest.raises(errors.ValidationError) as exc_info:
        identity_service.create_account(db_service, parse_account_create(clash))
    assert exc_info.value.message == "Username is already taken"


def test_student_id_must_be_unique(db_service, payloads, parse_account_create):
    identity_service.create_account(db_service, parse_account_create(payloads["Student"]))
    clash = dict(payloads["Student"], username="student2")

    with pytest.raises(errors.ValidationError) as exc_info:
        identity_service.create_account(db_service, parse_account_create(clash))
    assert exc_info.value.message == "Student ID is already taken"


def test_faculty_id_must_be_unique(db_service, payloads, parse_account_create):
    identity_service.create_account(db_service, parse_account_create(payloads["Faculty"]))
    clash = dict(payloads["Faculty"], username="faculty2")

    with pytest.raises(errors.ValidationError) as exc_info:
        identity_service.create_account(db_service, parse_account_create(clash))
    assert exc_info.value.message == "Faculty ID is already taken"


def test_verify_credential(db_service, payloads, parse_account_create):
    created = identity_service.create_account(db_service, parse_account_create(payloads["Admin"]))
    stored = identity_service.find_by_id(db_service, created.id)

    assert identity_service.verify_credential(stored, "pass123") is True
    assert identity_service.verify_credential(stored, "wrong") is False
    assert identity_service.verify_credential(stored, None) is False


def test_find_by_username_and_id(db_service, payloads, parse_account_create):
    created = identity_service.create_account(db_service, parse_account_create(payloads["Student"]))

    assert identity_service.find_by_username(db_service, "student1").id == created.id
    assert identity_service.find_by_username(db_service, "nobody") is None
    assert identity_service.find_by_id(db_service, created.id).username == "student1"
    assert identity_service.find_by_id(db_service, "acc_missing") is None


def test_delete_account(db_service, payloads, parse_account_create):
    created = identity_service.create_account(db_service, parse_account_create(payloads["Admin"]))

    assert db_service.delete_account(created.id) is True
    assert identity_service.find_by_id(db_service, created.id) is None
    assert db_service.delete_account(created.id) is False
