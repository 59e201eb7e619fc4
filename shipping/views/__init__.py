from .shipping_method import ShippingMethodViewSet

__all__ = [
    "ShippingMethodViewSet",
]
