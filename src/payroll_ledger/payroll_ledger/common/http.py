"""Helpers shared by the JSON controllers."""

from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request

from ..core.exceptions import ComputationError, ConcurrencyError, ConflictError, NotFoundError, ValidationError
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def api_errors(view):
    """Translate domain exceptions into JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return error_response(str(e), 400)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except ConcurrencyError as e:
            logger.warning("Concurrent update in %s: %s", view.__name__, e)
            return error_response(str(e), 409)
        except ConflictError as e:
            return error_response(str(e), 409)
        except ComputationError as e:
            logger.error("Computation failed in %s: %s", view.__name__, e)
            return error_response(str(e), 500)
        except Exception:
            logger.exception("Unexpected error in %s", view.__name__)
            return error_response("Server error", 500)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def body_date(data: dict, key: str) -> date:
    value = data.get(key)
    if not value:
        raise ValidationError(f"{key} is required")
    return parse_iso_date(value)


def query_date(key: str) -> Optional[date]:
    value = request.args.get(key)
    return parse_iso_date(value) if value else None


def optional_str(data: dict, key: str) -> Optional[str]:
    value: Any = data.get(key)
    if value is None:
        return None
    return str(value)
