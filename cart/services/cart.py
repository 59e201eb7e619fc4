# cart/services/cart.py

"""
======================================================
PATH: cart/services/cart.py
======================================================
CART SERVICES

Rules:
- One cart per user (created lazily on first add)
- The same product + variant merges into one line (quantities add)
- price_at_add is snapshotted from products.services.pricing
- quantity 0 on update removes the line
"""

from __future__ import annotations

import logging

from django.db import transaction

from cart.models import Cart, CartItem
from cart.services.exceptions import CartItemNotFoundError, CartNotFoundError
from products.models import Product
from products.services.exceptions import ProductNotFoundError
from products.services.pricing import effective_price

logger = logging.getLogger(__name__)


def get_cart(user) -> Cart | None:
    return Cart.objects.filter(user=user).prefetch_related("items__product").first()


def _require_cart(user) -> Cart:
    cart = get_cart(user)
    if cart is None:
        raise CartNotFoundError()
    return cart


def _require_item(cart: Cart, item_id) -> CartItem:
    item = CartItem.objects.filter(cart=cart, pk=item_id).first()
    if item is None:
        raise CartItemNotFoundError()
    return item


@transaction.atomic
def add_item(*, user, product_id, quantity: int = 1, variant_id=None, selected_options=None) -> Cart:
    product = Product.objects.filter(pk=product_id, is_active=True).first()
    if product is None:
        raise ProductNotFoundError()

    variant_key = str(variant_id or "").strip()
    price = effective_price(product, variant_key or None)

    cart, _ = Cart.objects.get_or_create(user=user)
    item = (
        CartItem.objects.select_for_update()
        .filter(cart=cart, product=product, variant_id=variant_key)
        .first()
    )

    if item is None:
        CartItem.objects.create(
            cart=cart,
            product=product,
            variant_id=variant_key,
            selected_options=selected_options or {},
            quantity=quantity,
            price_at_add=price,
        )
    else:
        item.quantity += quantity
        item.price_at_add = price
        if selected_options:
            item.selected_options = selected_options
        item.save(update_fields=["quantity", "price_at_add", "selected_options", "updated_at"])

    logger.debug(
        "Cart item added",
        extra={"user_id": str(user.pk), "product_id": str(product.pk), "quantity": quantity},
    )
    return get_cart(user)


@transaction.atomic
def update_item(*, user, item_id, quantity: int) -> Cart:
    cart = _require_cart(user)
    item = _require_item(cart, item_id)

    if quantity <= 0:
        item.delete()
    else:
        item.quantity = quantity
        item.save(update_fields=["quantity", "updated_at"])
    return get_cart(user)


def remove_item(*, user, item_id) -> Cart:
    cart = _require_cart(user)
    _require_item(cart, item_id).delete()
    return get_cart(user)


def clear_cart(user) -> None:
    CartItem.objects.filter(cart__user=user).delete()


def cart_lines(cart: Cart | None) -> list[dict]:
    """Cart items in the shape orders.services.totals.price_lines() accepts."""
    if cart is None:
        return []
    return [
        {
            "item_id": item.pk,
            "product_id": item.product_id,
            "variant_id": item.variant_id or None,
            "selected_options": item.selected_options,
            "quantity": item.quantity,
        }
        for item in cart.items.all()
    ]
