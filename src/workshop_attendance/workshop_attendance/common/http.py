from __future__ import annotations

import logging
from functools import wraps
from typing import Any

from flask import jsonify, request

from ..core.exceptions import ConsistencyError, NotFoundError, RemoteError, ValidationError

logger = logging.getLogger(__name__)


def json_object() -> dict[str, Any]:
    """Request body as a dict; a missing body counts as empty."""
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValidationError("request body must be a JSON object")
    return body


def error_response(message: str, status: int, **extra):
    return jsonify({"success": False, "message": message, **extra}), status


def api_errors(view):
    """Map domain errors raised by a view onto JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return error_response(str(e), 400)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except RemoteError as e:
            return error_response(str(e), 502, retryable=e.retryable)
        except ConsistencyError as e:
            logger.error("data inconsistency: %s", e)
            return error_response(str(e), 500)

    return wrapper
