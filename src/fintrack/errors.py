"""Error taxonomy and the Flask handlers that map it onto HTTP responses."""

from __future__ import annotations

from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from .logging_config import get_logger

logger = get_logger(__name__)


class FinTrackError(Exception):
    """Base class for errors raised by FinTrack services."""

    status_code = 500
    code = "internal_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message}


class ValidationError(FinTrackError):
    """Malformed or out-of-contract input. Never retried."""

    status_code = 400
    code = "validation_error"

    def __init__(self, errors: dict[str, list[str]], message: str = "Validation error") -> None:
        super().__init__(message)
        self.errors = errors

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["errors"] = self.errors
        return payload


class NotFoundError(FinTrackError):
    """A referenced transaction or user does not exist."""

    status_code = 404
    code = "not_found"


class StoreError(FinTrackError):
    """The persistence layer is unavailable or failed."""

    status_code = 500
    code = "store_failure"


def register_error_handlers(app: Flask) -> None:
    """Attach JSON error handlers for the FinTrack taxonomy."""

    @app.errorhandler(FinTrackError)
    def _handle_fintrack_error(exc: FinTrackError):
        if exc.status_code >= 500:
            logger.error("Request failed: %s", exc.message, extra={"error_code": exc.code})
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(SQLAlchemyError)
    def _handle_store_error(exc: SQLAlchemyError):
        logger.exception("Store failure while handling request")
        return jsonify(StoreError("The data store failed to complete the request").to_dict()), 500

    @app.errorhandler(HTTPException)
    def _handle_http_error(exc: HTTPException):
        return (
            jsonify({"error": (exc.name or "error").lower().replace(" ", "_"), "message": exc.description}),
            exc.code or 500,
        )
