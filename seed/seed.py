"""Seed script for demo data.

Running this script creates the tables if needed and inserts a demo
user with a short exercise log. Invoke it with
``python -m seed.seed`` from the repository root.
"""
from __future__ import annotations

from exercise_tracker import create_app, db
from exercise_tracker.services import ExerciseTrackerService

DEMO_EXERCISES = [
    ("Morning run", 30, "2024-01-01"),
    ("Yoga", 45, "2024-01-03"),
    ("Cycling", 60, "2024-01-06"),
    ("Swimming", 40, "2024-01-08"),
]


def run_seeds() -> None:
    """Insert a demo user and their exercises into the database."""
    app = create_app()
    with app.app_context():
        db.create_all()
        service = ExerciseTrackerService(app.extensions["store"])
        user = service.create_user("demo")
        for description, duration, when in DEMO_EXERCISES:
            service.add_exercise(user.id, description, duration, when)
        print(f"Seed data inserted successfully (user id {user.id}).")


if __name__ == "__main__":
    run_seeds()
