from flask import jsonify
from werkzeug.exceptions import HTTPException

from catalog_api.logger import logger


class ApiError(Exception):
    """Base error rendered as ``{"status": "error", "message": ...}``."""

    status_code = 500
    message = "An error occurred while processing your request"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {"status": "error", "message": self.message}


class AuthError(ApiError):
    status_code = 401
    message = "Invalid token"


class NotFound(ApiError):
    status_code = 404
    message = "Not found"


class ValidationError(ApiError):
    status_code = 400
    message = "Invalid request payload"

    def __init__(self, message=None, errors=None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self):
        data = super().to_dict()
        data["errors"] = self.errors
        return data


class PersistenceError(ApiError):
    status_code = 500
    message = "An error occurred while saving the data"


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            logger.error(f"[{error.__class__.__name__}] {error}")
        return jsonify(error.to_dict()), error.status_code

    # Keep unmatched routes and bad methods in the same JSON shape
    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({"status": "error", "message": error.description}), error.code
