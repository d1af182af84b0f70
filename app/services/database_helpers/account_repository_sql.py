# /app/services/database_helpers/account_repository_sql.py

"""
Raw SQLAlchemy queries for the unified `accounts` table. Every lookup here is
role-agnostic unless a role is passed explicitly; the `role` column decides
which variant a row represents.
"""

import logging
from typing import Dict, Iterable, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core import errors
from app.db.models.account_models import Account

logger = logging.getLogger(__name__)


class AccountRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_account_by_id(self, account_id: str) -> Optional[Account]:
        return self.db.query(Account).filter(Account.id == account_id).first()

    def get_account_by_username(self, username: str) -> Optional[Account]:
        return self.db.query(Account).filter(Account.username == username).first()

    def get_account_by_student_id(self, student_id: str) -> Optional[Account]:
        """Looks up a Student by the institution-issued studentId (not the account id)."""
        return self.db.query(Account).filter(Account.studentId == student_id).first()

    def get_account_by_faculty_id(self, faculty_id: str) -> Optional[Account]:
        return self.db.query(Account).filter(Account.facultyId == faculty_id).first()

    def get_accounts_by_ids(self, account_ids: Iterable[str]) -> Dict[str, Account]:
        """Batch lookup keyed by account id. Unknown ids are simply absent from the result."""
        ids = list(set(account_ids))
        if not ids:
            return {}
        rows = self.db.query(Account).filter(Account.id.in_(ids)).all()
        return {row.id: row for row in rows}

    def count_accounts_by_role(self, role: str) -> int:
        return self.db.query(func.count(Account.id)).filter(Account.role == role).scalar() or 0

    def add_account(self, record: Dict) -> Account:
        new_account = Account(**record)
        self.db.add(new_account)
        try:
            self.db.commit()
        except IntegrityError:
            # A concurrent registration won the race for a unique column.
            self.db.rollback()
            logger.warning("Account insert rejected by a unique constraint (username=%s)", record.get("username"))
            raise errors.ValidationError("An account with these details already exists")
        self.db.refresh(new_account)
        return new_account

    def delete_account(self, account_id: str) -> bool:
        account = self.get_account_by_id(account_id)
        if account:
            self.db.delete(account)
            self.db.commit()
            return True
        return False
