"""JSON envelope helpers: ``{success, data, message?}``."""

from typing import Any

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

DEFAULT_LIMIT = 50
MAX_LIMIT = 200


def ok(data: Any = None, message: str | None = None, status_code: int = status.HTTP_200_OK, **extra: Any) -> Response:
    body: dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    body.update(extra)
    return Response(body, status=status_code)


def created(data: Any, message: str | None = None) -> Response:
    return ok(data, message=message, status_code=status.HTTP_201_CREATED)


def failure(message: str, status_code: int, **extra: Any) -> Response:
    return Response({"success": False, "message": message, **extra}, status=status_code)


def _int_param(request: Request, name: str, default: int) -> int:
    try:
        value = int(request.query_params.get(name, default))
    except (TypeError, ValueError):
        return default
    return value if value >= 0 else default


def page_params(request: Request) -> tuple[int, int]:
    """Read ``limit``/``offset`` query params, falling back to defaults on junk input."""
    limit = _int_param(request, "limit", DEFAULT_LIMIT) or DEFAULT_LIMIT
    return min(limit, MAX_LIMIT), _int_param(request, "offset", 0)


def pagination(limit: int, offset: int, count: int) -> dict[str, int]:
    return {"limit": limit, "offset": offset, "count": count}
