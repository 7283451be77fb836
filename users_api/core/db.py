"""Database setup for the SQLAlchemy engine (connection pool) and sessions."""
from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import Settings


Base = declarative_base()


def create_db_engine(settings: Settings) -> Engine:
    return create_engine(settings.sqlalchemy_url(), pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker:
    # Rows are handed back to callers after the session closes.
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
