"""DRF exception handler mapping domain errors to HTTP responses.

Handlers never build error responses themselves: they let domain errors
propagate and this handler turns them into the error envelope. Internal
error details are never exposed.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from core.errors import DomainError, ErrorKind
from core.responses import failure

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
}


def exception_handler(exc: Exception, context: dict) -> Response | None:
    if isinstance(exc, DomainError):
        logger.info("Domain error in %s: %s", context.get("view").__class__.__name__, exc)
        return failure(exc.message, STATUS_BY_KIND[exc.kind], code=exc.code.value)

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        return failure("Invalid request", response.status_code, errors=response.data)
    if isinstance(exc, APIException):
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        response.data = {"success": False, "message": detail}
    return response
