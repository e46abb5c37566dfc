"""
Application factory for the Exercise Tracker API.

This module provides a function to create and configure the Flask
application. The SQLAlchemy extension and the user store are
initialised here, and the API blueprint is registered inside the
factory so the app can be built fresh for each test.

Environment variables control the database connection, the allowed
CORS origins and the log level.
In production, set ``DATABASE_URL`` in your environment. A default
configuration is provided for development, using SQLite when no
database URL is available.
"""

from __future__ import annotations

import os

from flask import Flask
from flask_cors import CORS

# The shared db object is bound to an app in create_app().
from .db import db
from .store import UserStore


def create_app(test_config: dict | None = None, store=None) -> Flask:
    """Create and configure a Flask application.

    Parameters
    ----------
    test_config: dict | None, optional
        Optional configuration overrides used when running tests.
    store: optional
        Store capability to serve requests with. Defaults to a
        ``UserStore`` backed by the app's SQLAlchemy session.

    Returns
    -------
    Flask
        A configured Flask application instance.
    """
    app = Flask(__name__)

    app.config.update(
        SQLALCHEMY_DATABASE_URI=os.environ.get("DATABASE_URL", "sqlite:///exercise_tracker.db"),
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
        LOG_LEVEL=os.environ.get("LOG_LEVEL", "INFO"),
        CORS_ORIGINS=os.environ.get("CORS_ORIGINS", "*"),
    )

    if test_config:
        app.config.update(test_config)

    from .logging_config import setup_logging
    setup_logging(app.config["LOG_LEVEL"])

    CORS(app, origins=app.config["CORS_ORIGINS"])
    db.init_app(app)
    app.extensions["store"] = store if store is not None else UserStore(db.session)

    from .errors import register_error_handlers
    register_error_handlers(app)

    from .routes.users import users_bp

    app.register_blueprint(users_bp, url_prefix="/api")

    @app.route("/api/health")
    def health_check() -> dict[str, str]:
        """Return a simple health check response."""
        return {"status": "ok"}

    return app
