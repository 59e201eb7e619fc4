# backend/exceptions.py
"""
API ERROR NORMALIZATION

Every domain error in the storefront derives from ApiError:
- carries an HTTP status + a (often localized) human message
- carries a stable machine code for the frontend

The DRF exception handler below renders ApiError (and plain 404s) as:

    {"error": {"code": "<CODE>", "message": "<message>"}}

Serializer validation errors keep DRF's native field-map shape.
"""

from __future__ import annotations

import logging

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base exception for all storefront service failures."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "BAD_REQUEST"

    def __init__(self, message: str, *, status_code: int | None = None, code: str | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"


class ForbiddenError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"


def error_response(*, code: str, message: str, http_status: int):
    return Response(
        {"error": {"code": code, "message": message}},
        status=http_status,
    )


def api_exception_handler(exc, context):
    if isinstance(exc, ApiError):
        view = context.get("view")
        logger.info(
            "API error",
            extra={
                "code": exc.code,
                "status": exc.status_code,
                "view": view.__class__.__name__ if view else None,
            },
        )
        return error_response(code=exc.code, message=exc.message, http_status=exc.status_code)

    if isinstance(exc, (Http404, NotFound)):
        return error_response(
            code="NOT_FOUND",
            message="Resource not found",
            http_status=status.HTTP_404_NOT_FOUND,
        )

    return exception_handler(exc, context)
