# orders/services/checkout.py

"""
======================================================
PATH: orders/services/checkout.py
======================================================
CHECKOUT (ORDER PLACEMENT)

Flow (atomic):
1) Price every line server-side (orders.services.totals)
2) Check tracked inventory: quantity - reserved >= requested
3) Compute totals (shipping + coupon)
4) Create Order + OrderItems (order number is unique, regenerated on collision)
5) Clear the shopper's cart, record coupon usage

After commit (best effort, logged on failure):
6) Confirmation notification to the customer
7) Email to ADMIN_NOTIFICATION_EMAILS
"""

from __future__ import annotations

import logging
from collections import defaultdict

from django.conf import settings
from django.db import transaction

from cart.services import clear_cart
from coupons.services import record_usage
from notifications.models import Notification
from notifications.services import notify, notify_admins
from orders.models import Order, OrderItem
from orders.services.exceptions import InsufficientStockError
from orders.services.totals import compute_totals, price_lines, resolve_shipping_method

logger = logging.getLogger(__name__)

LEGACY_ADDRESS_KEYS = ("province", "city", "address", "postal_code")


def normalize_shipping_address(customer: dict) -> dict:
    """
    Accept either customer.shipping_address or the legacy flat fields
    (province, city, address, postal_code) and return one address dict.
    """
    address = dict(customer.get("shipping_address") or {})
    if not address and any(customer.get(k) for k in LEGACY_ADDRESS_KEYS):
        address = {k: customer.get(k) or "" for k in LEGACY_ADDRESS_KEYS}

    if address:
        if not address.get("recipient_name"):
            address["recipient_name"] = customer.get("recipient_name") or customer.get("name") or ""
        if not address.get("recipient_phone"):
            address["recipient_phone"] = customer.get("recipient_phone") or customer.get("phone") or ""
    return address


def _check_stock(lines) -> None:
    requested = defaultdict(int)
    products = {}
    for line in lines:
        key = (line.product.pk, line.variant_id)
        requested[key] += line.quantity
        products[key] = line.product

    for key, qty in requested.items():
        product = products[key]
        available = product.available_quantity(key[1] or None)
        if available is not None and available < qty:
            raise InsufficientStockError(
                f"Insufficient stock for {product.title}: requested {qty}, available {available}"
            )


def _item_summary(order: Order) -> str:
    return "\n".join(
        f"• {item.quantity}× {item.title} ({item.unit_price:,.0f} تومان)"
        for item in order.items.all()
    )


def _send_order_notifications(order: Order) -> None:
    notify(
        user=order.user,
        email=order.customer_email,
        type=Notification.TYPE_ORDER_EMAIL,
        subject=f"تأیید سفارش {order.order_number}",
        message=(
            f"سفارش شما با شماره {order.order_number} با موفقیت ثبت شد.\n"
            f"مبلغ کل: {order.total_amount:,.0f} تومان\n\n{_item_summary(order)}"
        ),
        order=order,
    )

    notify_admins(
        subject=f"[{settings.STORE_NAME}] سفارش جدید {order.order_number}",
        message=(
            f"سفارش {order.order_number}\n"
            f"مشتری: {order.customer_name or '-'} / {order.customer_email} / {order.customer_phone}\n"
            f"مبلغ: {order.total_amount:,.0f} تومان\n"
            f"روش پرداخت: {order.payment_method}\n"
            f"توضیحات: {order.note or '-'}\n\n{_item_summary(order)}"
        ),
    )


def place_order(
    *,
    user=None,
    customer: dict,
    items: list[dict],
    shipping_method_id=None,
    coupon_code=None,
    payment_method: str | None = None,
    shipping_preferences: dict | None = None,
    note: str = "",
) -> Order:
    """
    Create an order from raw item dicts. Client-supplied totals are never used.
    """
    owner = user if user is not None and getattr(user, "is_authenticated", False) else None

    with transaction.atomic():
        lines = price_lines(items)
        _check_stock(lines)

        method = resolve_shipping_method(shipping_method_id)
        totals = compute_totals(
            lines=lines,
            shipping_method=method,
            coupon_code=coupon_code,
            user=owner,
        )

        order = Order.objects.create(
            user=owner,
            customer_name=(customer.get("name") or "").strip() or (owner.name if owner else ""),
            customer_email=customer["email"].strip().lower(),
            customer_phone=customer["phone"].strip(),
            shipping_address=normalize_shipping_address(customer),
            subtotal_amount=totals.subtotal,
            shipping_amount=totals.shipping,
            discount_amount=totals.discount,
            total_amount=totals.total,
            coupon_code=totals.coupon_code,
            payment_method=(payment_method or "online").strip().lower() or "online",
            shipping_method=method.snapshot() if method else None,
            shipping_preferences=shipping_preferences or {},
            note=note or "",
        )

        OrderItem.objects.bulk_create(
            [
                OrderItem(
                    order=order,
                    product=line.product,
                    title=line.product.title,
                    variant_id=line.variant_id,
                    selected_options=line.selected_options,
                    unit_price=line.unit_price,
                    quantity=line.quantity,
                    position=idx,
                )
                for idx, line in enumerate(lines)
            ]
        )

        if owner is not None:
            clear_cart(owner)

        if totals.coupon_code and totals.discount > 0:
            record_usage(totals.coupon_code, totals.discount)

    logger.info(
        "Order placed",
        extra={
            "order_id": str(order.pk),
            "order_number": order.order_number,
            "user_id": str(owner.pk) if owner else None,
            "total": str(order.total_amount),
        },
    )

    _send_order_notifications(order)
    return order
