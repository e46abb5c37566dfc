"""Centralised error handling and custom exceptions.

The service layer signals failures with the exceptions defined here
rather than with HTTP response codes. The Flask app registers the
handlers below during application factory initialisation, and every
error is serialised as ``{"error": <message>}``.
"""
from __future__ import annotations

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self, status_code: int = 400):
        return jsonify({"error": self.message}), status_code


class NotFoundError(Exception):
    """Raised when a requested resource cannot be found."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self, status_code: int = 404):
        return jsonify({"error": self.message}), status_code


class StoreError(Exception):
    """Raised when the underlying persistence layer fails."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self, status_code: int = 500):
        return jsonify({"error": self.message}), status_code


def register_error_handlers(app) -> None:
    """Register custom error handlers on the given Flask app."""
    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        return err.to_response(400)

    @app.errorhandler(NotFoundError)
    def handle_not_found_error(err: NotFoundError):
        return err.to_response(404)

    @app.errorhandler(StoreError)
    def handle_store_error(err: StoreError):
        logger.error("Store failure: %s", err.message)
        return err.to_response(500)

    @app.errorhandler(404)
    def handle_unknown_route(err):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def handle_method_not_allowed(err):
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        if isinstance(err, HTTPException):
            return jsonify({"error": err.description}), err.code
        logger.exception("Unhandled error while serving request")
        return jsonify({"error": str(err)}), 500
