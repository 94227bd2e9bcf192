# core/errors.py
import json
from typing import Any, Dict


class AmedosError(Exception):
    """Base class for errors raised by the radar command"""


class PayloadError(AmedosError):
    """An operation payload is missing fields or carries the wrong types"""


class DispatchError(AmedosError):
    """The backend operation could not be handed off"""


def error_details(exc: BaseException) -> Dict[str, Any]:
    """
    Flattens an exception into a JSON-safe dict.
    HTTP errors from aiohttp carry the status and the request URL, slack_sdk
    errors carry the API response body; both are kept when present.
    """
    details: Dict[str, Any] = {
        "name": type(exc).__name__,
        "message": str(exc),
    }
    status = getattr(exc, "status", None)
    if isinstance(status, int):
        details["status"] = status
    request_info = getattr(exc, "request_info", None)
    if request_info is not None:
        details["url"] = str(request_info.real_url)
    response = getattr(exc, "response", None)
    data = getattr(response, "data", None)
    if isinstance(data, dict):
        details["response"] = data
    return details


def serialize_error(exc: BaseException) -> str:
    return json.dumps(error_details(exc), ensure_ascii=False, default=str)
