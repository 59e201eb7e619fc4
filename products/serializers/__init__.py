# products/serializers/__init__.py

from .category import CategorySerializer
from .price_alert import DiscountPreviewSerializer, PriceAlertSerializer
from .product import ProductSerializer

__all__ = [
    "CategorySerializer",
    "DiscountPreviewSerializer",
    "PriceAlertSerializer",
    "ProductSerializer",
]
