from .coupon import CouponViewSet

__all__ = [
    "CouponViewSet",
]
