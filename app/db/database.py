# /app/db/database.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ..core.config import get_settings

# The database URL comes from the environment (DATABASE_URL). Local development
# falls back to a SQLite file in the working directory.
DATABASE_URL = get_settings().database_url

# The 'check_same_thread' argument is only needed for SQLite.
engine_args = {"connect_args": {"check_same_thread": False}} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, **engine_args)

# Each instance of this class is one database session.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency to get a DB session. Used by the DatabaseService provider.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
