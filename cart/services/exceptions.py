# cart/services/exceptions.py

from backend.exceptions import NotFoundError


class CartNotFoundError(NotFoundError):
    code = "CART_NOT_FOUND"

    def __init__(self, message: str = "Cart not found"):
        super().__init__(message)


class CartItemNotFoundError(NotFoundError):
    code = "CART_ITEM_NOT_FOUND"

    def __init__(self, message: str = "Item not found in cart"):
        super().__init__(message)
