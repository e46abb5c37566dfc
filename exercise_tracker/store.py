"""User store backed by SQLAlchemy.

``UserStore`` is the only component that talks to the database. It
offers the insert / find / update-by-id capability the service layer
depends on and converts any SQLAlchemy failure into a ``StoreError``
after rolling the session back. The application factory creates one
store per app and the routes hand it to the service, so tests can
swap in a different implementation.
"""
from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from .errors import StoreError
from .models import User

logger = logging.getLogger(__name__)

USER_ID_RE = re.compile(r"[0-9a-fA-F]{32}")


class UserStore:
    """Persist users and their exercise logs through a SQLAlchemy session."""

    def __init__(self, session) -> None:
        self.session = session

    @staticmethod
    def is_valid_id(value) -> bool:
        """Return True if ``value`` is syntactically a user identifier."""
        return isinstance(value, str) and USER_ID_RE.fullmatch(value) is not None

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Failed to %s: %s", action, exc)
            raise StoreError(str(exc)) from exc
        except Exception:
            self.session.rollback()
            raise

    def insert(self, user: User) -> User:
        with self._guard("insert user"):
            self.session.add(user)
            self.session.commit()
        return user

    def find_all(self) -> List[User]:
        with self._guard("list users"):
            return self.session.query(User).order_by(User.pk.asc()).all()

    def find_by_id(self, user_id: str) -> Optional[User]:
        with self._guard("load user"):
            return self.session.query(User).filter_by(id=user_id.lower()).first()

    def update(self, user: User) -> User:
        with self._guard("update user"):
            self.session.add(user)
            self.session.commit()
        return user
