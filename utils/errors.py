import logging

from flask import request
from werkzeug.exceptions import HTTPException

from utils.responses import send_response

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Domain error carrying the message and HTTP status sent to the client."""

    status = 500

    def __init__(self, message: str, status: int = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class InvalidArgument(AppError):
    status = 400


class Conflict(AppError):
    status = 400


class NotFound(AppError):
    status = 404


class Unexpected(AppError):
    status = 500


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(err: AppError):
        if err.status >= 500:
            logger.error("%s %s failed: %s", request.method, request.path, err.message)
        return send_response(err.status, False, err.message)

    @app.errorhandler(HTTPException)
    def handle_http_error(err: HTTPException):
        return send_response(err.code or 500, False, err.description or err.name)

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        # raw exception text stays in the log
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return send_response(500, False, "An unexpected error occurred")
