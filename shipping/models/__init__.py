from .shipping_method import ShippingMethod

__all__ = [
    "ShippingMethod",
]
