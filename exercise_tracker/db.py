"""Database setup utilities.

This module exposes the ``db`` object used by the models and the
user store. The application factory initialises ``db`` with the
Flask app.
"""
from __future__ import annotations

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
