"""Shared SQLAlchemy Base and session factory – imported by all models and by Alembic."""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from homehealth.config import get_settings

Base = declarative_base()

engine = create_engine(get_settings().database_url, pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db():
    """Request-scoped database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
