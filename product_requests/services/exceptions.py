# product_requests/services/exceptions.py

from backend.exceptions import ApiError, ForbiddenError, NotFoundError


class ProductRequestError(ApiError):
    code = "PRODUCT_REQUEST_ERROR"


class ProductRequestValidationError(ProductRequestError):
    code = "VALIDATION_ERROR"


class ProductRequestNotFoundError(NotFoundError):
    code = "PRODUCT_REQUEST_NOT_FOUND"

    def __init__(self, message: str = "درخواست یافت نشد"):
        super().__init__(message)


class ProductRequestForbiddenError(ForbiddenError):
    def __init__(self, message: str = "شما مجاز به حذف این درخواست نیستید"):
        super().__init__(message)
