# orders/services/exceptions.py

from backend.exceptions import ApiError, NotFoundError


class OrderError(ApiError):
    """Base exception for checkout / order lifecycle failures."""

    code = "ORDER_ERROR"


class OrderNotFoundError(NotFoundError):
    code = "ORDER_NOT_FOUND"

    def __init__(self, message: str = "Order not found"):
        super().__init__(message)


class OrderItemNotFoundError(NotFoundError):
    code = "ORDER_ITEM_NOT_FOUND"

    def __init__(self, message: str = "Order item not found"):
        super().__init__(message)


class InsufficientStockError(OrderError):
    code = "INSUFFICIENT_STOCK"


class InvalidShippingMethodError(OrderError):
    code = "INVALID_SHIPPING_METHOD"

    def __init__(self, message: str = "Shipping method not found"):
        super().__init__(message)
