"""
Routes for users, their exercises and exercise logs.

Request bodies may be sent as JSON or as an HTML form. The heavy
lifting is delegated to ``ExerciseTrackerService``; validation
failures surface through the error handlers in
``exercise_tracker.errors``.
"""

from __future__ import annotations

from flask import Blueprint, current_app, request

from ..schemas import ExerciseResultSchema, LogSchema, UserSchema
from ..services import ExerciseTrackerService


users_bp = Blueprint("users", __name__)


def _service() -> ExerciseTrackerService:
    return ExerciseTrackerService(current_app.extensions["store"])


def _payload() -> dict:
    """Return the request body from JSON or form data."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


@users_bp.route("/users", methods=["POST"])
def create_user() -> tuple[dict, int]:
    """Create a new user from ``username``."""
    user = _service().create_user(_payload().get("username"))
    return UserSchema().dump(user), 201


@users_bp.route("/users", methods=["GET"])
def list_users() -> tuple[list[dict], int]:
    """List every user's ``id`` and ``username``."""
    users = _service().list_users()
    return UserSchema(many=True).dump(users), 200


@users_bp.route("/users/<user_id>/exercises", methods=["POST"])
def add_exercise(user_id: str) -> tuple[dict, int]:
    """Log an exercise for a user.

    Requires ``description`` and ``duration``; ``date`` is optional and
    defaults to today. The response carries the new entry alongside
    the user's identity, not the full log.
    """
    data = _payload()
    user, exercise = _service().add_exercise(
        user_id,
        data.get("description"),
        data.get("duration"),
        data.get("date"),
    )
    result = {
        "id": user.id,
        "username": user.username,
        "description": exercise.description,
        "duration": exercise.duration,
        "date": exercise.date,
    }
    return ExerciseResultSchema().dump(result), 201


@users_bp.route("/users/<user_id>/logs", methods=["GET"])
def get_logs(user_id: str) -> tuple[dict, int]:
    """Return a user's exercise log.

    Optional ``from`` and ``to`` bound the dates inclusively and
    ``limit`` keeps only the first entries. Values that do not parse
    are ignored.
    """
    user, entries = _service().get_logs(
        user_id,
        date_from=request.args.get("from"),
        date_to=request.args.get("to"),
        limit=request.args.get("limit"),
    )
    result = {
        "id": user.id,
        "username": user.username,
        "count": len(entries),
        "log": entries,
    }
    return LogSchema().dump(result), 200
