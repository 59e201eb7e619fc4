from .exceptions import (
    ProductRequestForbiddenError,
    ProductRequestNotFoundError,
    ProductRequestValidationError,
)
from .requests import create_request, delete_request, respond, statistics

__all__ = [
    "ProductRequestForbiddenError",
    "ProductRequestNotFoundError",
    "ProductRequestValidationError",
    "create_request",
    "delete_request",
    "respond",
    "statistics",
]
