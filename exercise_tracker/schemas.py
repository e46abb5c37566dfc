"""
Serialization schemas using Marshmallow for the Exercise Tracker.

Dates are rendered in a fixed human-readable form such as
``"Sun Jan 15 2023"`` rather than as ISO timestamps, and user
listings never include the exercise log.
"""

from __future__ import annotations

from marshmallow import Schema, fields
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema

from .models import User, Exercise

DATE_FORMAT = "%a %b %d %Y"


class UserSchema(SQLAlchemyAutoSchema):
    """Schema for serialising ``User`` identity without its log."""

    class Meta:
        model = User
        exclude = ("pk",)


class ExerciseSchema(SQLAlchemyAutoSchema):
    """Schema for serialising ``Exercise`` log entries."""

    date = fields.Date(format=DATE_FORMAT)

    class Meta:
        model = Exercise
        exclude = ("pk",)


class ExerciseResultSchema(Schema):
    """A newly added exercise flattened alongside its user's identity."""

    id = fields.String()
    username = fields.String()
    description = fields.String()
    duration = fields.Integer()
    date = fields.Date(format=DATE_FORMAT)


class LogSchema(Schema):
    """A user's (possibly filtered) exercise log."""

    id = fields.String()
    username = fields.String()
    count = fields.Integer()
    log = fields.Nested(ExerciseSchema, many=True)
