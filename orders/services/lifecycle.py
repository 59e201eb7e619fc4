# orders/services/lifecycle.py

"""
ORDER LIFECYCLE (admin + owner actions after checkout)

- update_status()        payment / fulfillment / payment_reference + owner notification
- notify_customer()      compiled (or custom) email to the customer
- update_delivery()      delivery message / credentials / tracking code
- acknowledge_delivery() owner confirms receipt
- update_item_warranty() per-line warranty record
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from notifications.models import Notification
from notifications.services import notify
from orders.models import Order, OrderItem
from orders.services.exceptions import OrderItemNotFoundError, OrderNotFoundError

logger = logging.getLogger(__name__)

PAYMENT_LABELS = {
    Order.PAYMENT_PENDING: "در انتظار پرداخت",
    Order.PAYMENT_PAID: "پرداخت شده",
    Order.PAYMENT_FAILED: "ناموفق",
}

FULFILLMENT_LABELS = {
    Order.FULFILLMENT_PENDING: "در انتظار پردازش",
    Order.FULFILLMENT_ASSIGNED: "در حال ارسال",
    Order.FULFILLMENT_DELIVERED: "تحویل شده",
    Order.FULFILLMENT_REFUNDED: "مسترد شده",
}


@transaction.atomic
def update_status(order: Order, *, payment_status=None, fulfillment_status=None, payment_reference=None) -> Order:
    fields = []
    if payment_status:
        order.payment_status = payment_status
        fields.append("payment_status")
    if fulfillment_status:
        order.fulfillment_status = fulfillment_status
        fields.append("fulfillment_status")
    if payment_reference is not None:
        order.payment_reference = payment_reference
        fields.append("payment_reference")

    if not fields:
        return order

    order.save(update_fields=fields + ["updated_at"])

    logger.info(
        "Order status updated",
        extra={
            "order_id": str(order.pk),
            "payment_status": order.payment_status,
            "fulfillment_status": order.fulfillment_status,
        },
    )

    if order.user_id:
        notify(
            user=order.user,
            type=Notification.TYPE_ORDER_UPDATE,
            subject=f"به‌روزرسانی سفارش {order.order_number}",
            message=(
                f"وضعیت پرداخت: {PAYMENT_LABELS.get(order.payment_status, order.payment_status)}\n"
                f"وضعیت تحویل: {FULFILLMENT_LABELS.get(order.fulfillment_status, order.fulfillment_status)}"
            ),
            order=order,
        )
    return order


def compile_customer_message(order: Order) -> str:
    store = settings.STORE_NAME
    greeting = f"سلام {order.customer_name}" if order.customer_name else f"سلام همراه {store}"
    lines = "\n".join(
        f"• {item.quantity}× {item.title} ({item.unit_price:,.0f} تومان)"
        for item in order.items.all()
    )
    return (
        f"{greeting}\n\n"
        f"سفارش شماره {order.order_number} با مبلغ {order.total_amount:,.0f} تومان ثبت شده است.\n"
        f"جزئیات اقلام:\n{lines}\n\n"
        f"وضعیت پرداخت: {PAYMENT_LABELS.get(order.payment_status, order.payment_status)}\n"
        f"وضعیت تحویل: {FULFILLMENT_LABELS.get(order.fulfillment_status, order.fulfillment_status)}\n\n"
        f"با تشکر از خرید شما؛ تیم {store}"
    )


def notify_customer(order: Order, *, subject: str | None = None, message: str | None = None) -> dict:
    subject = (subject or "").strip() or f"رسید سفارش {order.order_number}"
    message = (message or "").strip() or compile_customer_message(order)

    notify(
        user=order.user,
        email=order.customer_email,
        type=Notification.TYPE_ORDER_EMAIL,
        subject=subject,
        message=message,
        order=order,
    )

    return {
        "order_id": str(order.pk),
        "order_number": order.order_number,
        "to": order.customer_email,
        "subject": subject,
        "message": message,
    }


@transaction.atomic
def update_delivery(
    order: Order,
    *,
    message=None,
    credentials=None,
    tracking_code=None,
    delivered_at=None,
    updated_by=None,
) -> Order:
    info = dict(order.delivery_info or {})
    if message is not None:
        info["message"] = message
    if tracking_code is not None:
        info["tracking_code"] = tracking_code
    info["delivered_at"] = (delivered_at or timezone.now()).isoformat()
    if updated_by is not None:
        info["updated_by"] = str(updated_by.pk)

    order.delivery_info = info
    fields = ["delivery_info", "updated_at"]
    if credentials is not None:
        order.delivery_credentials = credentials
        fields.append("delivery_credentials")
    order.save(update_fields=fields)

    if message or credentials:
        body = message or "اطلاعات تحویل سفارش شما آماده است."
        if credentials:
            body = f"{body}\n\n{credentials}"
        if tracking_code:
            body = f"{body}\nکد رهگیری: {tracking_code}"
        notify(
            user=order.user,
            email=order.customer_email,
            type=Notification.TYPE_ORDER_UPDATE,
            subject=f"اطلاعات تحویل سفارش {order.order_number}",
            message=body,
            order=order,
        )
    return order


def acknowledge_delivery(order: Order, *, user) -> Order:
    if order.user_id is None or order.user_id != user.pk:
        raise OrderNotFoundError()

    if not order.customer_acknowledged:
        order.customer_acknowledged = True
        order.customer_acknowledged_at = timezone.now()
        order.save(update_fields=["customer_acknowledged", "customer_acknowledged_at", "updated_at"])
    return order


def update_item_warranty(order: Order, item_id, *, status, start_date=None, end_date=None, description="") -> OrderItem:
    item = OrderItem.objects.filter(order=order, pk=item_id).first()
    if item is None:
        raise OrderItemNotFoundError()

    item.warranty = {
        "status": status,
        "start_date": start_date.isoformat() if start_date else None,
        "end_date": end_date.isoformat() if end_date else None,
        "description": description or "",
    }
    item.save(update_fields=["warranty"])
    return item
