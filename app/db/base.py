# /app/db/base.py

# Central registry for all SQLAlchemy models. Importing them here guarantees
# that Base.metadata knows every table when `create_all` or Alembic runs.

from .base_class import Base

from .models.account_models import Account
from .models.classroom_subject_models import Classroom, Subject
