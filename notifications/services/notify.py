# notifications/services/notify.py

"""
======================================================
PATH: notifications/services/notify.py
======================================================
NOTIFICATION DELIVERY

Purpose:
- Persist an in-app Notification (when a user is known)
- Send an email copy through Django's mail framework (when an address is known)
- Fan out admin alerts to settings.ADMIN_NOTIFICATION_EMAILS

Rules:
- Email delivery is best effort: failures are logged, never raised, so a
  mail outage cannot fail checkout or any other triggering request.
"""

from __future__ import annotations

import logging
from smtplib import SMTPException

from django.conf import settings
from django.core.mail import send_mail

from notifications.models import Notification

logger = logging.getLogger(__name__)


def send_email(*, to, subject: str, message: str) -> bool:
    recipients = [to] if isinstance(to, str) else list(to or [])
    recipients = [r.strip() for r in recipients if r and r.strip()]
    if not recipients:
        return False

    try:
        send_mail(
            subject=subject,
            message=message,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=recipients,
            fail_silently=False,
        )
    except (SMTPException, OSError, ValueError):
        logger.exception(
            "Notification email failed",
            extra={"recipients": len(recipients), "subject": subject},
        )
        return False
    return True


def notify(
    *,
    user=None,
    email: str | None = None,
    type: str = Notification.TYPE_SYSTEM,
    subject: str,
    message: str,
    order=None,
) -> Notification | None:
    """
    Deliver a notification.

    Returns the persisted Notification, or None for guests (email only).
    """
    notification = None
    if user is not None:
        notification = Notification.objects.create(
            user=user,
            order=order,
            type=type,
            subject=subject,
            message=message,
        )

    if email:
        send_email(to=email, subject=subject, message=message)

    logger.info(
        "Notification dispatched",
        extra={
            "type": type,
            "user_id": str(user.pk) if user is not None else None,
            "order_id": str(order.pk) if order is not None else None,
            "emailed": bool(email),
        },
    )
    return notification


def notify_admins(*, subject: str, message: str) -> bool:
    recipients = list(getattr(settings, "ADMIN_NOTIFICATION_EMAILS", []) or [])
    if not recipients:
        logger.debug("No admin notification recipients configured")
        return False
    return send_email(to=recipients, subject=subject, message=message)
