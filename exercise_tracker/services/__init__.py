"""Service layer for the Exercise Tracker.

This package holds the business logic between the Flask route
handlers and the user store. Nothing here performs HTTP handling;
services return model objects and raise exceptions defined in
``exercise_tracker.errors`` when something goes wrong.
"""

from .exercise_service import ExerciseTrackerService
from .log_filters import filter_log, parse_date, parse_limit, parse_optional_date

__all__ = [
    "ExerciseTrackerService",
    "filter_log",
    "parse_date",
    "parse_limit",
    "parse_optional_date",
]
