# notifications/models/notification.py

import uuid

from django.conf import settings
from django.db import models


class Notification(models.Model):
    """
    In-app inbox entry for a shopper.

    Rows are created by notifications.services.notify(); an email copy is
    sent alongside when an address is known.
    """

    TYPE_ORDER_EMAIL = "order_email"
    TYPE_ORDER_UPDATE = "order_update"
    TYPE_PRICE_ALERT = "price_alert"
    TYPE_SYSTEM = "system"

    TYPE_CHOICES = [
        (TYPE_ORDER_EMAIL, "Order email"),
        (TYPE_ORDER_UPDATE, "Order update"),
        (TYPE_PRICE_ALERT, "Price alert"),
        (TYPE_SYSTEM, "System"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notifications",
    )
    order = models.ForeignKey(
        "orders.Order",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="notifications",
    )

    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default=TYPE_SYSTEM)
    subject = models.CharField(max_length=255)
    message = models.TextField()
    read = models.BooleanField(default=False, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "read"], name="notification_user_read_idx"),
        ]

    def __str__(self):
        return f"{self.type}: {self.subject}"
