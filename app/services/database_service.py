# /app/services/database_service.py

from typing import Dict, Generator, Iterable, List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

# --- Core Database Setup ---
from app.db.database import get_db

# --- Repository Imports ---
from .database_helpers.account_repository_sql import AccountRepositorySQL
from .database_helpers.classroom_subject_repository_sql import ClassroomRepositorySQL, SubjectRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Facade over the SQL repositories. One instance is built per request
        around that request's session, so nothing here is shared between
        requests.
        """
        self.account_repo = AccountRepositorySQL(db_session)
        self.classroom_repo = ClassroomRepositorySQL(db_session)
        self.subject_repo = SubjectRepositorySQL(db_session)

    # --- ACCOUNT METHODS (DELEGATED) ---
    def get_account_by_id(self, account_id: str): return self.account_repo.get_account_by_id(account_id)
    def get_account_by_username(self, username: str): return self.account_repo.get_account_by_username(username)
    def get_account_by_student_id(self, student_id: str): return self.account_repo.get_account_by_student_id(student_id)
    def get_account_by_faculty_id(self, faculty_id: str): return self.account_repo.get_account_by_faculty_id(faculty_id)
    def get_accounts_by_ids(self, account_ids: Iterable[str]) -> Dict: return self.account_repo.get_accounts_by_ids(account_ids)
    def count_accounts_by_role(self, role: str) -> int: return self.account_repo.count_accounts_by_role(role)
    def add_account(self, account_record: Dict): return self.account_repo.add_account(account_record)
    def delete_account(self, account_id: str) -> bool: return self.account_repo.delete_account(account_id)

    # --- CLASSROOM METHODS (DELEGATED) ---
    def get_all_classrooms(self) -> List: return self.classroom_repo.get_all_classrooms()
    def get_classroom_by_id(self, classroom_id: str): return self.classroom_repo.get_classroom_by_id(classroom_id)
    def get_classroom_by_name(self, name: str): return self.classroom_repo.get_classroom_by_name(name)
    def get_classrooms_by_ids(self, classroom_ids: Iterable[str]) -> Dict: return self.classroom_repo.get_classrooms_by_ids(classroom_ids)
    def count_classrooms(self) -> int: return self.classroom_repo.count_classrooms()
    def add_classroom(self, classroom_record: Dict): return self.classroom_repo.add_classroom(classroom_record)
    def update_classroom(self, classroom_id: str, classroom_update_data: Dict) -> Optional[object]: return self.classroom_repo.update_classroom(classroom_id, classroom_update_data)
    def delete_classroom(self, classroom_id: str) -> bool: return self.classroom_repo.delete_classroom(classroom_id)

    # --- SUBJECT METHODS (DELEGATED) ---
    def get_all_subjects(self) -> List: return self.subject_repo.get_all_subjects()
    def get_subject_by_id(self, subject_id: str): return self.subject_repo.get_subject_by_id(subject_id)
    def get_subject_by_code(self, code: str): return self.subject_repo.get_subject_by_code(code)
    def get_subjects_by_ids(self, subject_ids: Iterable[str]) -> Dict: return self.subject_repo.get_subjects_by_ids(subject_ids)
    def count_subjects(self) -> int: return self.subject_repo.count_subjects()
    def add_subject(self, subject_record: Dict): return self.subject_repo.add_subject(subject_record)
    def update_subject(self, subject_id: str, subject_update_data: Dict) -> Optional[object]: return self.subject_repo.update_subject(subject_id, subject_update_data)
    def delete_subject(self, subject_id: str) -> bool: return self.subject_repo.delete_subject(subject_id)


# --- DEPENDENCY PROVIDER ---
def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
