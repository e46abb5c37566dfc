"""
Database models for the Exercise Tracker.

A ``User`` owns an ordered log of ``Exercise`` entries. Users are
identified publicly by an opaque hex string; the integer primary keys
only record insertion order, so the log always reads back in the
order entries were appended rather than sorted by date.
"""

from __future__ import annotations

import uuid
from datetime import date

from . import db


def new_user_id() -> str:
    """Return a fresh opaque user identifier."""
    return uuid.uuid4().hex


class User(db.Model):
    """A person whose exercises are tracked."""
    __allow_unmapped__ = True  # allow unmapped type annotations for SQLAlchemy 2.0
    __tablename__ = "users"

    pk: int = db.Column(db.Integer, primary_key=True)
    id: str = db.Column(db.String(32), unique=True, nullable=False, default=new_user_id)
    username: str = db.Column(db.String(255), nullable=False)

    # Relationship attributes stay unannotated so SQLAlchemy maps ``log`` as a list.
    log = db.relationship(
        "Exercise",
        back_populates="user",
        order_by="Exercise.pk",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<User {self.id} {self.username!r}>"


class Exercise(db.Model):
    """A single exercise entry in a user's log."""
    __allow_unmapped__ = True
    __tablename__ = "exercises"

    pk: int = db.Column(db.Integer, primary_key=True)
    user_pk: int = db.Column(db.Integer, db.ForeignKey("users.pk"), nullable=False)
    description: str = db.Column(db.String(1000), nullable=False)
    # Minutes
    duration: int = db.Column(db.Integer, nullable=False)
    date: date = db.Column(db.Date, nullable=False, default=date.today)

    user = db.relationship("User", back_populates="log")

    def __repr__(self) -> str:
        return f"<Exercise {self.description!r} {self.duration}min {self.date}>"
