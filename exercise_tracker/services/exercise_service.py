"""Business logic for users and their exercise logs.

``ExerciseTrackerService`` validates input, talks to the injected
store and returns model objects for the routes to serialise. All
validation happens before the store is asked to write anything.
Adding an exercise is a plain read-modify-write of the whole user, so
two concurrent additions to one user may race and the last write wins.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Tuple

from ..errors import NotFoundError, ValidationError
from ..models import Exercise, User
from ..util.sanitization import clean_text
from .log_filters import filter_log, parse_date, parse_limit, parse_optional_date

logger = logging.getLogger(__name__)

MAX_DURATION = 2**63 - 1
MIN_DURATION = -(2**63)


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _to_int(value) -> int:
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        return int(float(text))


def _parse_duration(value) -> int:
    """Return ``value`` as whole minutes, truncating fractional input.

    The result must fit a signed 64-bit database integer.
    """
    if isinstance(value, bool):
        raise ValidationError("Duration must be an integer")
    try:
        minutes = _to_int(value)
    except (ValueError, OverflowError) as exc:
        raise ValidationError("Duration must be an integer") from exc
    if not MIN_DURATION <= minutes <= MAX_DURATION:
        raise ValidationError("Duration must be an integer")
    return minutes


class ExerciseTrackerService:
    """Create users, append exercises and read back filtered logs."""

    def __init__(self, store) -> None:
        self.store = store

    def create_user(self, username) -> User:
        """Persist a new user with an empty log.

        The username is trimmed; a missing or blank one is rejected.
        """
        name = clean_text(username) if isinstance(username, str) else ""
        if not name:
            raise ValidationError("Username is required")
        user = self.store.insert(User(username=name))
        logger.info("Created user %s (%s)", user.id, user.username)
        return user

    def list_users(self) -> List[User]:
        return self.store.find_all()

    def _get_user(self, user_id) -> User:
        if not self.store.is_valid_id(user_id):
            raise ValidationError("Invalid user ID format")
        user = self.store.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def add_exercise(self, user_id, description, duration, exercise_date=None) -> Tuple[User, Exercise]:
        """Append an exercise to a user's log and save the user.

        Checks run in a fixed order: required fields, identifier
        format, user existence, date, then duration. A blank or
        missing date means today.
        """
        text = clean_text(description)
        if not text or _is_blank(duration):
            raise ValidationError("Description and duration are required")
        user = self._get_user(user_id)

        if _is_blank(exercise_date):
            when = date.today()
        else:
            try:
                when = parse_date(str(exercise_date))
            except ValueError as exc:
                raise ValidationError("Invalid date") from exc
        minutes = _parse_duration(duration)

        exercise = Exercise(description=text, duration=minutes, date=when)
        user.log.append(exercise)
        self.store.update(user)
        logger.info("Added exercise to user %s: %s, %d min on %s", user.id, text, minutes, when)
        return user, exercise

    def get_logs(
        self,
        user_id,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> Tuple[User, List[Exercise]]:
        """Return a user and the selected entries of their log.

        Unparseable ``date_from``, ``date_to`` or ``limit`` values are
        ignored instead of rejected.
        """
        user = self._get_user(user_id)
        entries = filter_log(
            user.log,
            date_from=parse_optional_date(date_from),
            date_to=parse_optional_date(date_to),
            limit=parse_limit(limit),
        )
        return user, entries
