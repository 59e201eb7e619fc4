from .coupons import (
    CouponQuote,
    compute_discount,
    generate_code,
    record_usage,
    validate_coupon,
)
from .exceptions import CouponError, InvalidCouponError

__all__ = [
    "CouponError",
    "CouponQuote",
    "InvalidCouponError",
    "compute_discount",
    "generate_code",
    "record_usage",
    "validate_coupon",
]
