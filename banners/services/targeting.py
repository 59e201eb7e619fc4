# banners/services/targeting.py

"""
======================================================
PATH: banners/services/targeting.py
======================================================
BANNER TARGETING + COUNTERS

banners_for_page(page, user):
1) active banners whose display_on contains the page or "all"
2) inside the display_rules date window (missing bounds are open)
3) audience: show_to_users (authenticated / guest) and show_to_roles
4) caps: max_views / max_clicks
Result keeps priority-descending order.

Counters use F() so concurrent hits never lose increments.
"""

from __future__ import annotations

import logging
from datetime import timezone as dt_timezone

from django.db.models import F
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from banners.models import Banner
from banners.services.exceptions import BannerNotFoundError
from permissions.roles import ROLE_CUSTOMER, normalize_role

logger = logging.getLogger(__name__)


def _as_datetime(value):
    if not value:
        return None
    parsed = parse_datetime(str(value))
    if parsed is not None and timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, dt_timezone.utc)
    return parsed


def _in_window(rules: dict, now) -> bool:
    start = _as_datetime(rules.get("start_date"))
    end = _as_datetime(rules.get("end_date"))
    if start and start > now:
        return False
    if end and end < now:
        return False
    return True


def _audience_matches(rules: dict, user) -> bool:
    is_authenticated = bool(user is not None and getattr(user, "is_authenticated", False))

    show_to_users = rules.get("show_to_users") or []
    if "authenticated" in show_to_users and not is_authenticated:
        return False
    if "guest" in show_to_users and is_authenticated:
        return False

    show_to_roles = {normalize_role(r) for r in (rules.get("show_to_roles") or [])} - {None}
    if show_to_roles and is_authenticated:
        role = normalize_role(getattr(user, "role", None)) or ROLE_CUSTOMER
        if role not in show_to_roles:
            return False
    return True


def _cap(rules: dict, key: str) -> int | None:
    raw = rules.get(key)
    if isinstance(raw, bool) or not isinstance(raw, int) or raw <= 0:
        return None
    return raw


def _under_caps(banner: Banner, rules: dict) -> bool:
    max_views = _cap(rules, "max_views")
    if max_views is not None and banner.views >= max_views:
        return False
    max_clicks = _cap(rules, "max_clicks")
    if max_clicks is not None and banner.clicks >= max_clicks:
        return False
    return True


def banners_for_page(page: str, user=None) -> list[Banner]:
    page = (page or "").strip().lower()
    now = timezone.now()

    result = []
    for banner in Banner.objects.filter(active=True).order_by("-priority", "-created_at"):
        display_on = banner.display_on or []
        if page not in display_on and Banner.DISPLAY_ALL not in display_on:
            continue

        rules = banner.display_rules or {}
        if not _in_window(rules, now):
            continue
        if not _audience_matches(rules, user):
            continue
        if not _under_caps(banner, rules):
            continue
        result.append(banner)
    return result


def _increment(banner_id, field: str) -> None:
    updated = Banner.objects.filter(pk=banner_id).update(**{field: F(field) + 1})
    if not updated:
        raise BannerNotFoundError()


def track_view(banner_id) -> None:
    _increment(banner_id, "views")


def track_click(banner_id) -> None:
    _increment(banner_id, "clicks")
