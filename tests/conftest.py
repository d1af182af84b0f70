# /tests/conftest.py

import os

# Settings are read once at import time; these must be in place before `app` is imported.
os.environ.setdefault("JWT_SECRET", "test-secret-do-not-use-in-production")
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core import errors, security
from app.db.base import Base
from app.db.database import get_db
from app.main import app
from app.models.account_model import AccountCreateRequest
from app.services.database_service import DatabaseService


ADMIN_PAYLOAD = {
    "role": "Admin",
    "firstName": "Grace",
    "lastName": "Hopper",
    "username": "admin1",
    "password": "pass123",
}

STUDENT_PAYLOAD = {
    "role": "Student",
    "firstName": "Ada",
    "lastName": "Lovelace",
    "username": "student1",
    "password": "pass123",
    "studentId": "S-1001",
    "year": 2,
    "course": "Computer Science",
}

FACULTY_PAYLOAD = {
    "role": "Faculty",
    "firstName": "Alan",
    "lastName": "Turing",
    "username": "faculty1",
    "password": "pass123",
    "facultyId": "F-2001",
    "faculty": "Engineering",
}


@pytest.fixture
def payloads():
    """Fresh copies of one valid registration body per role, safe to modify in a test."""
    return {
        "Admin": dict(ADMIN_PAYLOAD),
        "Student": dict(STUDENT_PAYLOAD),
        "Faculty": dict(FACULTY_PAYLOAD),
    }


@pytest.fixture
def parse_account_create():
    """Validates a registration body the way POST /register does, raising the client-facing error."""
    def _parse(data):
        try:
            return AccountCreateRequest.model_validate(data).root
        except PydanticValidationError as exc:
            raise errors.ValidationError(errors.describe_validation_errors(exc.errors()))
    return _parse


@pytest.fixture
def fast_bcrypt(monkeypatch):
    """bcrypt at cost 12 is deliberately slow; tests that only need a valid hash use the minimum cost."""
    monkeypatch.setattr(security, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def engine():
    """A fresh in-memory SQLite database per test, shared across threads by StaticPool."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_service(session_factory, fast_bcrypt):
    """A DatabaseService bound to its own session on the test database."""
    session = session_factory()
    yield DatabaseService(db_session=session)
    session.close()


@pytest.fixture
def client(session_factory, fast_bcrypt):
    """A TestClient whose requests all talk to the test database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Returns a helper that registers an account and returns {token, account, headers}."""
    def _register(payload):
        response = client.post("/register", json=payload)
        assert response.status_code == 201, response.text
        body = response.json()
        return {
            "token": body["token"],
            "account": body["account"],
            "headers": {"Authorization": f"Bearer {body['token']}"},
        }
    return _register


@pytest.fixture
def admin(register):
    return register(ADMIN_PAYLOAD)


@pytest.fixture
def student(register):
    return register(STUDENT_PAYLOAD)


@pytest.fixture
def faculty(register):
    return register(FACULTY_PAYLOAD)


@pytest.fixture
def classroom(client, admin):
    """Room101 with a capacity of 30, created by the administrator."""
    response = client.post("/classrooms", json={"name": "Room101", "capacity": 30}, headers=admin["headers"])
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def subject(client, admin):
    response = client.post(
        "/subjects",
        json={"name": "Data Structures", "code": "CS201", "credits": 4, "department": "Computer Science"},
        headers=admin["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()
