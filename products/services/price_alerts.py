# products/services/price_alerts.py

"""
PRICE ALERTS

- create_price_alert(): refuses a second active alert that already covers
  the requested target (existing target <= new target)
- trigger_price_alerts(): fires every active alert whose target >= the
  product's current effective price, then deactivates it
"""

from __future__ import annotations

import logging

from django.utils import timezone

from notifications.models import Notification
from notifications.services import notify
from products.models import PriceAlert
from products.services.exceptions import DuplicatePriceAlertError
from products.services.pricing import effective_price, money

logger = logging.getLogger(__name__)


def create_price_alert(*, user, product, target_price, channel, destination) -> PriceAlert:
    target = money(target_price)

    covered = PriceAlert.objects.filter(
        user=user,
        product=product,
        active=True,
        target_price__lte=target,
    ).exists()
    if covered:
        raise DuplicatePriceAlertError()

    return PriceAlert.objects.create(
        user=user,
        product=product,
        target_price=target,
        channel=channel or PriceAlert.CHANNEL_EMAIL,
        destination=(destination or "").strip(),
    )


def _alert_message(product, price, alert) -> str:
    return (
        f"قیمت «{product.title}» به {price:,.0f} تومان رسید "
        f"(هدف شما: {alert.target_price:,.0f} تومان)."
    )


def trigger_price_alerts(product) -> int:
    """
    Returns the number of alerts fired.
    """
    price = effective_price(product)
    now = timezone.now()
    fired = 0

    alerts = (
        PriceAlert.objects.select_related("user")
        .filter(product=product, active=True, target_price__gte=price)
        .order_by("created_at")
    )

    for alert in alerts:
        # conditional update so a concurrent trigger cannot fire the same alert twice
        updated = PriceAlert.objects.filter(pk=alert.pk, active=True).update(
            active=False,
            triggered_at=now,
        )
        if not updated:
            continue

        email = None
        if alert.channel == PriceAlert.CHANNEL_EMAIL:
            email = alert.destination or alert.user.email

        # telegram alerts are delivered in-app only
        notify(
            user=alert.user,
            email=email,
            type=Notification.TYPE_PRICE_ALERT,
            subject=f"کاهش قیمت: {product.title}",
            message=_alert_message(product, price, alert),
        )
        fired += 1

    if fired:
        logger.info(
            "Price alerts triggered",
            extra={"product_id": str(product.pk), "fired": fired, "price": str(price)},
        )
    return fired
