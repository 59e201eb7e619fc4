# coupons/services/exceptions.py

from backend.exceptions import ApiError


class CouponError(ApiError):
    """Base exception for coupon failures."""

    code = "COUPON_ERROR"


class InvalidCouponError(CouponError):
    """
    Raised by validate_coupon(). message is the shopper-facing reason.
    """

    code = "INVALID_COUPON"
