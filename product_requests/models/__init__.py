from .product_request import ProductRequest

__all__ = [
    "ProductRequest",
]
