"""Error taxonomy shared by the HTTP API and process bootstrap.

API errors render as ``{"error": "<detail>"}`` so the frontend can show the
message as-is.
"""

from __future__ import annotations

import logging
from typing import Any

from django.core.exceptions import ImproperlyConfigured
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.exceptions import ParseError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class RelayAPIError(APIException):
    """Base class for errors rendered with the ``error`` key."""


class ContactValidationError(RelayAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "All fields are required!"
    default_code = "validation_error"


class InternalError(RelayAPIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = INTERNAL_ERROR_MESSAGE
    default_code = "internal_error"


class StartupConfigError(ImproperlyConfigured):
    """Required process configuration is missing; the server must not start."""


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    response = exception_handler(exc, context)

    if response is None:
        # Anything DRF does not know about is a fault on our side.
        view = context.get("view")
        logger.exception(
            "❌ Unhandled error in %s",
            type(view).__name__ if view is not None else "request",
            exc_info=exc,
        )
        return Response(
            {"error": INTERNAL_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, (RelayAPIError, ParseError)):
        response.data = {"error": str(exc.detail)}
    return response
