from flask import jsonify
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException
from sitekit.domain.invariants.exceptions import InvariantViolation


class NotFoundError(LookupError):
    """An entity lookup missed."""


class ConflictError(Exception):
    """A write collided with an existing row (duplicate slug, name...)."""


class StorageError(Exception):
    """A media storage backend failed to persist or remove a file."""


def _error(kind, message, status, **extra):
    body = {"error": kind, "message": message}
    body.update(extra)
    response = jsonify(body)
    response.status_code = status
    return response


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        return _error("InvariantViolation", str(error), 400)

    @app.errorhandler(NotFoundError)
    def handle_not_found(error):
        return _error("NotFound", str(error), 404)

    @app.errorhandler(ConflictError)
    def handle_conflict(error):
        return _error("Conflict", str(error), 409)

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        return _error(
            "ValidationError",
            "Request body failed validation",
            400,
            details=error.errors(include_url=False, include_context=False),
        )

    @app.errorhandler(StorageError)
    def handle_storage_error(error):
        app.logger.error("Media storage failure: %s", error)
        return _error("StorageError", "Failed to store file", 500)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return _error(error.name, error.description, error.code)
