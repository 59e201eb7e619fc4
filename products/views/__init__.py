# products/views/__init__.py

"""
Products views package exports.

Purpose:
- Central export point for router imports.
"""

from .category import CategoryViewSet
from .price_alert import PriceAlertViewSet
from .product import ProductViewSet

__all__ = [
    "CategoryViewSet",
    "PriceAlertViewSet",
    "ProductViewSet",
]
