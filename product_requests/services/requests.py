# product_requests/services/requests.py

"""
======================================================
PATH: product_requests/services/requests.py
======================================================
PRODUCT REQUESTS

- create_request():  persist + email admins (best effort)
- respond():         admin status change; stamps responded_at, notifies the requester
- delete_request():  owner while pending, or admin
- statistics():      per-status counters for the admin board
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.db.models import Count
from django.utils import timezone

from notifications.models import Notification
from notifications.services import notify, notify_admins
from permissions.roles import is_admin_user
from product_requests.models import ProductRequest
from product_requests.services.exceptions import ProductRequestForbiddenError

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    ProductRequest.STATUS_APPROVED: 'درخواست محصول "{name}" تایید شد',
    ProductRequest.STATUS_REJECTED: 'درخواست محصول "{name}" رد شد',
    ProductRequest.STATUS_COMPLETED: 'محصول "{name}" به فروشگاه اضافه شد!',
}


def create_request(*, user, product_name, category, brand, description="") -> ProductRequest:
    request_obj = ProductRequest.objects.create(
        user=user,
        product_name=product_name.strip(),
        category=category.strip(),
        brand=brand.strip(),
        description=(description or "").strip(),
    )

    logger.info("Product request created", extra={"request_id": str(request_obj.pk), "user_id": str(user.pk)})

    notify_admins(
        subject=f"[{settings.STORE_NAME}] درخواست محصول جدید: {request_obj.product_name}",
        message=(
            f"محصول: {request_obj.product_name}\n"
            f"دسته‌بندی: {request_obj.category}\n"
            f"برند: {request_obj.brand}\n"
            f"توضیحات: {request_obj.description or '-'}\n"
            f"درخواست‌دهنده: {user.email}"
        ),
    )
    return request_obj


def respond(request_obj: ProductRequest, *, status: str, admin_note=None) -> ProductRequest:
    previous = request_obj.status
    request_obj.status = status
    if admin_note:
        request_obj.admin_note = admin_note
    if status != ProductRequest.STATUS_PENDING:
        request_obj.responded_at = timezone.now()
    request_obj.save()

    if previous != status and status in STATUS_MESSAGES:
        subject = STATUS_MESSAGES[status].format(name=request_obj.product_name)
        notify(
            user=request_obj.user,
            type=Notification.TYPE_SYSTEM,
            subject=subject,
            message=admin_note or subject,
        )
    return request_obj


def delete_request(request_obj: ProductRequest, *, user) -> None:
    is_owner = request_obj.user_id == getattr(user, "pk", None)
    if not is_admin_user(user):
        if not is_owner or request_obj.status != ProductRequest.STATUS_PENDING:
            raise ProductRequestForbiddenError()
    request_obj.delete()


def statistics() -> dict:
    rows = ProductRequest.objects.order_by().values("status").annotate(n=Count("id"))
    counts = {row["status"]: row["n"] for row in rows}
    stats = {"total": sum(counts.values())}
    for status, _ in ProductRequest.STATUS_CHOICES:
        stats[status] = counts.get(status, 0)
    return stats
