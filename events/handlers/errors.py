"""Maps domain errors to HTTP responses.

Configured as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Every failure leaves
the API as {"ok": false, "error": <code>, "message": <text>}.
"""

import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain import errors

logger = logging.getLogger(__name__)

STATUS_BY_KIND: tuple[tuple[type[errors.DomainError], int], ...] = (
    (errors.ValidationError, status.HTTP_400_BAD_REQUEST),
    (errors.NotFoundError, status.HTTP_404_NOT_FOUND),
    (errors.AuthorizationError, status.HTTP_403_FORBIDDEN),
    (errors.ConflictError, status.HTTP_400_BAD_REQUEST),
)

def status_for(exc: errors.DomainError) -> int:
    for kind, code in STATUS_BY_KIND:
        if isinstance(exc, kind):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR

def failure(error: str, message: str, http_status: int) -> Response:
    return Response(
        {"ok": False, "error": error, "message": message},
        status=http_status,
    )

def domain_exception_handler(exc, context):
    if isinstance(exc, errors.DomainError):
        return failure(exc.code.value, exc.message, status_for(exc))

    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)
    if response is not None:
        # Field errors arrive as a dict or list; plain failures carry a sentence.
        message = exc.detail if isinstance(exc.detail, str) else "Invalid request"
        response.data = {
            "ok": False,
            "error": str(exc.default_code).upper(),
            "message": str(message),
            "details": response.data,
        }
        return response

    view = context.get("view")
    logger.exception("Unhandled error in %s", type(view).__name__ if view else "view")
    return failure(
        "INTERNAL_ERROR",
        "Internal server error",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
