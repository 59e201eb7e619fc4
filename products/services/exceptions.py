# products/services/exceptions.py

from rest_framework import status

from backend.exceptions import ApiError, NotFoundError


class CatalogError(ApiError):
    """Base exception for catalog / pricing failures."""


class ProductNotFoundError(NotFoundError):
    code = "PRODUCT_NOT_FOUND"

    def __init__(self, message: str = "Product not found"):
        super().__init__(message)


class VariantNotFoundError(CatalogError):
    code = "VARIANT_NOT_FOUND"

    def __init__(self, message: str = "Variant not found"):
        super().__init__(message)


class DuplicatePriceAlertError(CatalogError):
    code = "DUPLICATE_PRICE_ALERT"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(
        self,
        message: str = "شما قبلاً یک هشدار فعال برای این محصول با قیمت پایین‌تر یا مساوی دارید",
    ):
        super().__init__(message)
