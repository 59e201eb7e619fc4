from .product_request import ProductRequestViewSet

__all__ = ["ProductRequestViewSet"]
