"""Repository for user persistence and retrieval."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from users_api.core.errors import DatabaseError
from users_api.core.validation import USER_FIELDS, validate_user_fields
from users_api.models.user import User

LOGGER = logging.getLogger(__name__)


class UserRepository:
    """CRUD access to ``users`` through a pooled session factory.

    Each call checks a connection out of the engine's pool for the duration of
    its statement and returns it when the session closes.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self.session_factory = session_factory

    @contextmanager
    def session(self, operation: str) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
        except IntegrityError as exc:
            db.rollback()
            LOGGER.error("DB integrity error during %s: %s", operation, exc)
            raise DatabaseError("Integrity constraint violated", operation) from exc
        except OperationalError as exc:
            db.rollback()
            LOGGER.error("DB operational error during %s: %s", operation, exc)
            raise DatabaseError("Connection or operational error", operation) from exc
        except SQLAlchemyError as exc:
            db.rollback()
            LOGGER.error("DB error during %s: %s", operation, exc)
            raise DatabaseError("Database operation failed", operation) from exc
        finally:
            db.close()

    def list_users(self) -> list[User]:
        with self.session("list_users") as db:
            return db.query(User).all()

    def get_user(self, user_id: int) -> User | None:
        with self.session("get_user") as db:
            return db.query(User).filter(User.id == user_id).first()

    def user_exists(self, user_id: int) -> bool:
        with self.session("user_exists") as db:
            size = db.query(func.count(User.id)).filter(User.id == user_id).scalar()
            return size > 0

    def create_user(self, candidate: Mapping[str, Any]) -> User:
        validate_user_fields(candidate)
        with self.session("create_user") as db:
            user = User(
                username=candidate["username"],
                email=candidate["email"],
                password=candidate["password"],
            )
            db.add(user)
            db.commit()
            user_id = user.id
        LOGGER.info("Created user id=%s", user_id)
        return self.get_user(user_id)

    def update_user(self, user_id: int, changes: Mapping[str, Any]) -> User | None:
        """Apply the fields present in ``changes`` and return the re-fetched row.

        Keys other than username/email/password are ignored; with nothing left
        no statement is issued.
        """
        fields = {name: changes[name] for name in USER_FIELDS if name in changes}
        validate_user_fields(fields, partial=True)
        if fields:
            with self.session("update_user") as db:
                db.query(User).filter(User.id == user_id).update(fields, synchronize_session=False)
                db.commit()
            LOGGER.info("Updated user id=%s columns=%s", user_id, sorted(fields))
        return self.get_user(user_id)

    def delete_user(self, user_id: int) -> bool:
        with self.session("delete_user") as db:
            affected = db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
            db.commit()
        if affected:
            LOGGER.info("Deleted user id=%s", user_id)
        return affected > 0
