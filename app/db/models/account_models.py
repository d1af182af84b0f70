# /app/db/models/account_models.py

"""
SQLAlchemy model for the unified `accounts` table.

Students, faculty members and administrators share one table. The `role`
column is the discriminator; the role-specific columns are nullable at the
database level and their presence is enforced by the request models in
`app.models.account_model` before anything reaches this table.
"""

from sqlalchemy import Column, String, Integer, DateTime
from sqlalchemy.sql import func

from ..base_class import Base


class Account(Base):
    __tablename__ = "accounts"

    id = Column(String, primary_key=True, index=True)
    role = Column(String, nullable=False, index=True)  # 'Student', 'Faculty' or 'Admin'

    firstName = Column(String, nullable=False)
    lastName = Column(String, nullable=False)
    middleName = Column(String, nullable=True)
    username = Column(String, unique=True, index=True, nullable=False)

    # bcrypt hash. Never part of any response model.
    password_hash = Column(String, nullable=False)

    # Student fields
    studentId = Column(String, unique=True, index=True, nullable=True)
    year = Column(Integer, nullable=True)
    course = Column(String, nullable=True)

    # Faculty fields
    facultyId = Column(String, unique=True, index=True, nullable=True)
    faculty = Column(String, nullable=True)

    createdAt = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
