# analytics/services/tracking.py

"""
======================================================
PATH: analytics/services/tracking.py
======================================================
Writes tracking hits. Called from the public, throttled endpoints.
"""

from __future__ import annotations

import hashlib
import logging
from urllib.parse import urlparse

from analytics.models import AnalyticsEvent
from analytics.services.user_agent import parse_user_agent

logger = logging.getLogger(__name__)


def client_ip(request) -> str:
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR", "") or ""


def hash_ip(ip: str) -> str:
    if not ip:
        return ""
    return hashlib.sha256(ip.encode("utf-8")).hexdigest()


def record_event(request, *, event_type: str, data: dict) -> AnalyticsEvent:
    """
    Persist one hit. Client/device fields come from the request, never the payload.
    """
    user = request.user if getattr(request.user, "is_authenticated", False) else None
    user_agent = request.META.get("HTTP_USER_AGENT", "")

    fields = dict(data)
    if not fields.get("path"):
        fields["path"] = urlparse(fields["url"]).path or "/"

    event = AnalyticsEvent.objects.create(
        type=event_type,
        user=user,
        is_authenticated=user is not None,
        user_agent=user_agent[:1000],
        ip_hash=hash_ip(client_ip(request)),
        **parse_user_agent(user_agent),
        **fields,
    )
    logger.debug("Tracked %s", event_type, extra={"path": event.path})
    return event
