from __future__ import annotations

from functools import wraps
from typing import Any, Dict

from bson import ObjectId
from flask import Flask, g, jsonify, request
from pymongo.errors import PyMongoError
from werkzeug.exceptions import HTTPException

from ..core.constants import IDENTITY_HEADER
from ..core.exceptions import AuthenticationError, DomainError


def json_body() -> Dict[str, Any]:
    """Request JSON as a dict; anything else (missing, malformed, a list) is {}."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def identity_required(view):
    """Reject the request unless the identity header carries a well-formed id.

    The id is exposed to the view through current_identity(). Tokens sent in
    the request body are ignored.
    """

    @wraps(view)
    def wrapper(*args, **kwargs):
        token = (request.headers.get(IDENTITY_HEADER) or "").strip()
        if not token or not ObjectId.is_valid(token):
            raise AuthenticationError("Unauthorized")
        g.identity_id = token
        return view(*args, **kwargs)

    return wrapper


def current_identity() -> str:
    return g.identity_id


def _error(message: str, status_code: int):
    return jsonify({"success": False, "message": message}), status_code


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        return _error(str(error), error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return _error(error.description or error.name, error.code or 500)

    @app.errorhandler(PyMongoError)
    def handle_storage_error(error: PyMongoError):
        app.logger.exception("storage failure on %s %s", request.method, request.path)
        return _error("Internal server error", 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        app.logger.exception("unhandled error on %s %s", request.method, request.path)
        return _error("Internal server error", 500)
