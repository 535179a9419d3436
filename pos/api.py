"""Request/response plumbing shared by the JSON API views."""
import json
import logging
from functools import wraps

from django.conf import settings
from django.http import JsonResponse

logger = logging.getLogger(__name__)


class BadRequest(Exception):
    """A client error that maps straight to a 400 response."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details


def error_response(message, status, details=None):
    payload = {"error": message}
    if details is not None:
        payload["details"] = details
    return JsonResponse(payload, status=status)


def form_error_details(form):
    return {
        field: [error["message"] for error in errors]
        for field, errors in form.errors.get_json_data().items()
    }


def invalid_form(form):
    return BadRequest("Invalid input.", form_error_details(form))


def json_body(request):
    try:
        body = json.loads(request.body or b"{}")
    except (TypeError, ValueError):
        raise BadRequest("Request body must be valid JSON.")
    if not isinstance(body, dict):
        raise BadRequest("Request body must be a JSON object.")
    return body


def parse_id(value, label):
    """Turn a query string or body id into an int, or raise BadRequest."""
    if isinstance(value, bool):
        value = None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value)
    raise BadRequest(f"Invalid or missing {label} ID.")


def require_fields(body, fields, message):
    missing = [field for field in fields if body.get(field) in (None, "")]
    if missing:
        raise BadRequest(message, {"missing": missing})


def handle_errors(action):
    """
    Wrap an API handler so client errors become 400s and anything else a 500.

    The exception text only goes back to the caller when DEBUG is on.
    """
    def decorator(view):
        @wraps(view)
        def wrapper(request, *args, **kwargs):
            try:
                return view(request, *args, **kwargs)
            except BadRequest as exc:
                return error_response(exc.message, 400, exc.details)
            except Exception as exc:
                logger.exception("Failed to %s (%s %s)", action, request.method, request.path)
                details = str(exc) if settings.DEBUG else None
                return error_response(f"Failed to {action}.", 500, details)
        return wrapper
    return decorator
