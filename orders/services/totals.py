# orders/services/totals.py

"""
======================================================
PATH: orders/services/totals.py
======================================================
ORDER TOTAL COMPUTATION (single source of truth)

Used by checkout AND the cart summary so both always agree.
The summary skips lines whose product or variant is gone; checkout rejects them.

Rules:
- Unit prices come from products.services.pricing (client prices are ignored)
- subtotal = sum(unit_price * quantity)
- shipping = method.shipping_cost_for(subtotal), 0 without a method
- discount = coupon discount on the subtotal (invalid code => 400)
- total    = max(subtotal - discount + shipping, 0)
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from coupons.services import validate_coupon
from coupons.services.coupons import normalize_code
from orders.services.exceptions import InvalidShippingMethodError
from products.models import Product
from products.services.exceptions import ProductNotFoundError
from products.services.pricing import effective_price
from shipping.models import ShippingMethod

TWOPLACES = Decimal("0.01")
ZERO = Decimal("0.00")


def _money(value) -> Decimal:
    return Decimal(str(value or 0)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class PricedLine:
    product: Product
    variant_id: str
    selected_options: dict
    quantity: int
    unit_price: Decimal

    @property
    def line_total(self) -> Decimal:
        return _money(self.unit_price * self.quantity)


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    shipping: Decimal
    discount: Decimal
    total: Decimal
    coupon_code: str = ""
    shipping_method: ShippingMethod | None = None
    item_count: int = 0
    lines: tuple = field(default_factory=tuple)

    def as_dict(self) -> dict:
        return {
            "item_count": self.item_count,
            "subtotal": str(self.subtotal),
            "shipping": str(self.shipping),
            "discount": str(self.discount),
            "total": str(self.total),
            "coupon_code": self.coupon_code or None,
            "shipping_method": self.shipping_method.snapshot() if self.shipping_method else None,
        }


def price_lines(items, *, unavailable: list | None = None) -> list[PricedLine]:
    """
    Resolve raw item dicts ({product_id, variant_id?, selected_options?, quantity})
    into priced lines. Unknown / inactive products raise ProductNotFoundError,
    unknown variants raise VariantNotFoundError.

    When an ``unavailable`` list is passed, such items are appended to it and
    left out of the result instead of raising.
    """
    items = list(items or [])
    ids = {str(i["product_id"]) for i in items}
    products = {str(p.pk): p for p in Product.objects.filter(pk__in=ids, is_active=True)}

    lines = []
    for item in items:
        product = products.get(str(item["product_id"]))
        variant_id = str(item.get("variant_id") or "").strip()
        gone = product is None or (variant_id and product.get_variant(variant_id) is None)
        if gone and unavailable is not None:
            unavailable.append(item)
            continue
        if product is None:
            raise ProductNotFoundError()

        lines.append(
            PricedLine(
                product=product,
                variant_id=variant_id,
                selected_options=item.get("selected_options") or {},
                quantity=int(item["quantity"]),
                unit_price=effective_price(product, variant_id or None),
            )
        )
    return lines


def resolve_shipping_method(method_id) -> ShippingMethod | None:
    raw = str(method_id or "").strip()
    if not raw:
        return None
    try:
        pk = uuid.UUID(raw)
    except ValueError:
        raise InvalidShippingMethodError()
    method = ShippingMethod.objects.filter(pk=pk, is_active=True).first()
    if method is None:
        raise InvalidShippingMethodError()
    return method


def compute_totals(*, lines, shipping_method=None, coupon_code=None, user=None) -> OrderTotals:
    subtotal = _money(sum((line.line_total for line in lines), ZERO))

    shipping = ZERO
    if shipping_method is not None:
        shipping = _money(shipping_method.shipping_cost_for(subtotal))

    discount = ZERO
    code = normalize_code(coupon_code)
    if code:
        quote = validate_coupon(
            code,
            user=user,
            cart_total=subtotal,
            product_ids=[line.product.pk for line in lines],
        )
        discount = _money(quote.discount)

    total = max(subtotal - discount + shipping, ZERO)

    return OrderTotals(
        subtotal=subtotal,
        shipping=shipping,
        discount=discount,
        total=_money(total),
        coupon_code=code,
        shipping_method=shipping_method,
        item_count=sum(line.quantity for line in lines),
        lines=tuple(lines),
    )
