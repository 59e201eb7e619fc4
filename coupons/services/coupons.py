# coupons/services/coupons.py

"""
======================================================
PATH: coupons/services/coupons.py
======================================================
COUPON ENGINE

validate_coupon() checks, in order (first failure wins):
  1. existence
  2. active flag
  3. date window (not started / expired)
  4. global usage limit
  5. minimum purchase
  6. applicable products / categories
  7. excluded products
  8. user-specific allow list
  9. first-time customers only (no PAID orders yet)
 10. per-user usage (PAID orders carrying this code)

Discount:
- percentage: total * value / 100, capped by max_discount_amount
- fixed:      min(value, total)
- rounded to a whole Toman
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from django.db.models import F
from django.utils import timezone

from coupons.models import Coupon
from coupons.services.exceptions import InvalidCouponError
from products.models import Product

logger = logging.getLogger(__name__)

CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
TWOPLACES = Decimal("0.01")

PAID = "paid"

MSG_NOT_FOUND = "کد تخفیف معتبر نیست"
MSG_INACTIVE = "این کد تخفیف غیرفعال است"
MSG_NOT_STARTED = "این کد تخفیف هنوز فعال نشده است"
MSG_EXPIRED = "این کد تخفیف منقضی شده است"
MSG_EXHAUSTED = "این کد تخفیف به پایان رسیده است"
MSG_MIN_PURCHASE = "حداقل مبلغ خرید باید {amount} تومان باشد"
MSG_NOT_APPLICABLE = "این کد تخفیف برای محصولات انتخابی شما اعمال نمی‌شود"
MSG_EXCLUDED = "این کد تخفیف برای برخی از محصولات انتخابی شما قابل استفاده نیست"
MSG_NOT_ALLOWED = "شما مجاز به استفاده از این کد تخفیف نیستید"
MSG_FIRST_TIME = "این کد تخفیف فقط برای مشتریان جدید است"
MSG_ALREADY_USED = "شما از این کد تخفیف استفاده کرده‌اید"


@dataclass(frozen=True)
class CouponQuote:
    coupon: Coupon
    discount: Decimal

    def as_dict(self) -> dict:
        c = self.coupon
        return {
            "id": str(c.id),
            "code": c.code,
            "name": c.name,
            "type": c.type,
            "value": str(c.value),
            "discount": str(self.discount),
            "stackable": c.stackable,
        }


def normalize_code(code) -> str:
    return str(code or "").strip().upper()


def _amount_label(value: Decimal) -> str:
    return f"{value:,.0f}"


def compute_discount(coupon: Coupon, cart_total) -> Decimal:
    total = Decimal(str(cart_total or 0))
    if total <= 0:
        return Decimal("0.00")

    if coupon.type == Coupon.TYPE_PERCENTAGE:
        discount = total * coupon.value / Decimal("100")
        if coupon.max_discount_amount:
            discount = min(discount, coupon.max_discount_amount)
    else:
        discount = min(coupon.value, total)

    whole = discount.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return whole.quantize(TWOPLACES)


def _touches_applicable_scope(coupon: Coupon, product_ids: set[str]) -> bool:
    if coupon.applicable_to == Coupon.APPLIES_PRODUCTS:
        allowed = {str(pk) for pk in coupon.applicable_products.values_list("id", flat=True)}
        return bool(allowed & product_ids)

    if coupon.applicable_to == Coupon.APPLIES_CATEGORIES:
        category_ids = list(coupon.applicable_categories.values_list("id", flat=True))
        if not category_ids or not product_ids:
            return False
        return Product.objects.filter(
            id__in=product_ids,
            categories__id__in=category_ids,
        ).exists()

    return True


def validate_coupon(code, *, user=None, cart_total, product_ids=()) -> CouponQuote:
    """
    Raises InvalidCouponError with the shopper-facing reason on failure.
    """
    coupon = Coupon.objects.filter(code=normalize_code(code)).first()
    if coupon is None:
        raise InvalidCouponError(MSG_NOT_FOUND)

    if not coupon.is_active:
        raise InvalidCouponError(MSG_INACTIVE)

    now = timezone.now()
    if now < coupon.start_date:
        raise InvalidCouponError(MSG_NOT_STARTED)
    if now > coupon.end_date:
        raise InvalidCouponError(MSG_EXPIRED)

    if coupon.usage_limit and coupon.used_count >= coupon.usage_limit:
        raise InvalidCouponError(MSG_EXHAUSTED)

    total = Decimal(str(cart_total or 0))
    if coupon.min_purchase_amount and total < coupon.min_purchase_amount:
        raise InvalidCouponError(
            MSG_MIN_PURCHASE.format(amount=_amount_label(coupon.min_purchase_amount))
        )

    ids = {str(pk) for pk in (product_ids or [])}
    if not _touches_applicable_scope(coupon, ids):
        raise InvalidCouponError(MSG_NOT_APPLICABLE)

    if ids and coupon.exclude_products.filter(id__in=ids).exists():
        raise InvalidCouponError(MSG_EXCLUDED)

    is_user = user is not None and getattr(user, "is_authenticated", False)

    if coupon.user_specific.exists():
        if not is_user or not coupon.user_specific.filter(pk=user.pk).exists():
            raise InvalidCouponError(MSG_NOT_ALLOWED)

    if coupon.first_time_only and is_user:
        if user.orders.filter(payment_status=PAID).exists():
            raise InvalidCouponError(MSG_FIRST_TIME)

    if is_user and coupon.usage_limit_per_user:
        used = user.orders.filter(payment_status=PAID, coupon_code=coupon.code).count()
        if used >= coupon.usage_limit_per_user:
            raise InvalidCouponError(MSG_ALREADY_USED)

    return CouponQuote(coupon=coupon, discount=compute_discount(coupon, total))


def record_usage(code, discount) -> None:
    """Bump usage counters after an order carrying this code is placed."""
    updated = Coupon.objects.filter(code=normalize_code(code)).update(
        used_count=F("used_count") + 1,
        total_orders=F("total_orders") + 1,
        total_discount_given=F("total_discount_given") + Decimal(str(discount or 0)),
    )
    if not updated:
        logger.warning("Coupon usage recorded for unknown code", extra={"code": normalize_code(code)})


def generate_code(length: int = 8) -> str:
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(length))


def generate_unique_code(length: int = 8, attempts: int = 10) -> str:
    for _ in range(attempts):
        code = generate_code(length)
        if not Coupon.objects.filter(code=code).exists():
            return code
    return generate_code(length + 2)

