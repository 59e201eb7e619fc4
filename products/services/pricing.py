# products/services/pricing.py

"""
======================================================
PATH: products/services/pricing.py
======================================================
PRICING + DISCOUNT DESIGNER

Purpose:
- One place that answers "what does this cost right now?"
- Two-way discount designer used by the admin panel:
    percent -> sale price (rounded to a friendly 1,000 step)
    sale price -> percent

Rules:
- Money is Decimal, 2dp, ROUND_HALF_UP (Toman).
- A variant carries its own price / sale_price / on_sale flags.
- A designed sale price is always strictly below the base price and above
  zero; anything else means "no sale".
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from django.core.exceptions import ValidationError

from products.services.exceptions import VariantNotFoundError

TWOPLACES = Decimal("0.01")
PRICE_STEP = Decimal("1000")
ZERO = Decimal("0.00")


def money(value) -> Decimal:
    if value is None or value == "":
        return ZERO
    try:
        return Decimal(str(value)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid amount: {value!r}") from exc


def _optional_money(value) -> Decimal | None:
    if value is None or value == "":
        return None
    return money(value)


def variant_effective_price(product, variant: dict) -> Decimal:
    price = _optional_money(variant.get("price"))
    if price is None:
        price = money(product.base_price)
    sale = _optional_money(variant.get("sale_price"))
    if variant.get("on_sale") and sale is not None:
        return sale
    return price


def effective_price(product, variant_id=None) -> Decimal:
    """
    Price a shopper pays for one unit.

    Raises VariantNotFoundError when a variant_id is given but the product
    has no such variant.
    """
    if variant_id:
        variant = product.get_variant(variant_id)
        if variant is None:
            raise VariantNotFoundError()
        return variant_effective_price(product, variant)

    if product.on_sale and product.sale_price is not None:
        return money(product.sale_price)
    return money(product.base_price)


def discount_percent(base_price, sale_price) -> int:
    base = money(base_price)
    if base <= ZERO or sale_price is None or sale_price == "":
        return 0
    sale = money(sale_price)
    if sale >= base:
        return 0
    pct = (base - sale) / base * Decimal("100")
    return int(pct.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _below_base(base: Decimal, value: Decimal) -> Decimal | None:
    """Cap at base - 1; anything that ends up <= 0 means "no sale"."""
    if value <= ZERO:
        return None
    if base > ZERO:
        value = min(value, base - Decimal("1"))
    if value <= ZERO:
        return None
    return money(value)


def sale_price_for_percent(base_price, percent) -> Decimal | None:
    base = money(base_price)
    pct = Decimal(str(percent or 0))
    if pct <= 0 or base <= ZERO:
        return None
    if pct > 100:
        pct = Decimal("100")

    raw = base * (Decimal("1") - pct / Decimal("100"))
    rounded = (raw / PRICE_STEP).quantize(Decimal("1"), rounding=ROUND_HALF_UP) * PRICE_STEP
    return _below_base(base, rounded)


def discount_preview(*, base_price, percent=None, sale_price=None) -> dict:
    """
    Admin "discount designer" preview.

    Exactly one of percent / sale_price drives the result. A supplied sale
    price is capped at base - 1; zero or negative means no sale.
    """
    base = money(base_price)

    if percent is not None and percent != "":
        designed = sale_price_for_percent(base, percent)
    elif sale_price is not None and sale_price != "":
        designed = _below_base(base, money(sale_price))
    else:
        raise ValidationError("percent or sale_price is required")

    if designed is None:
        return {"sale_price": None, "percent": 0, "savings": ZERO}

    return {
        "sale_price": designed,
        "percent": discount_percent(base, designed),
        "savings": money(base - designed),
    }
