from werkzeug.exceptions import HTTPException
from core.imports import jsonify, logging

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base for errors rendered as ``{"error": ..., "details": ...}``."""
    status_code = 500

    def __init__(self, error, details=None):
        super().__init__(error)
        self.error = error
        self.details = details

    def to_dict(self):
        return {"error": self.error, "details": self.details}


class ValidationFailed(ApiError):
    status_code = 400


class NotFound(ApiError):
    status_code = 404


class Conflict(ApiError):
    status_code = 409


class DownstreamError(ApiError):
    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(err):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        return jsonify({"error": err.name, "details": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected(err):
        logger.exception("Unhandled error")
        return jsonify({"error": "Something went wrong!", "details": str(err)}), 500
