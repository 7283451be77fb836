"""SQLAlchemy model for the users table."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String, Text

from users_api.core.db import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    username = Column(String(32), nullable=False)
    email = Column(Text, nullable=False)
    # Stored as given; passwords are not hashed.
    password = Column(String(256), nullable=False)
