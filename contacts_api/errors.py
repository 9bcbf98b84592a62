# contacts_api/errors.py
import logging
from flask import jsonify, request
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ContactAPIError(Exception):
    """Base for every error that is turned into a JSON `{"error": ...}` response."""
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MalformedInput(ContactAPIError):
    status_code = 400
    message = "Invalid request body"


class ValidationError(ContactAPIError):
    status_code = 400
    message = "Missing name or phone"


class MissingContactId(ValidationError):
    message = "Missing contact ID"


class InvalidContactId(ContactAPIError):
    status_code = 400
    message = "Invalid contact ID"


class ContactNotFound(ContactAPIError):
    status_code = 404
    message = "Contact not found"


class StoreUnavailable(ContactAPIError):
    # The message is chosen per operation by the service; driver details stay in the logs.
    status_code = 500
    message = "Database error"


def register_error_handlers(app):
    @app.errorhandler(ContactAPIError)
    def handle_contact_error(e):
        return jsonify({"error": e.message}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"error": e.name}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception(f"Unhandled exception on {request_summary()}")
        return jsonify({"error": "Internal server error"}), 500


def request_summary():
    return f"{request.method} {request.path}"
