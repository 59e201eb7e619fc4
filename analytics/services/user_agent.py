# analytics/services/user_agent.py

import re

from analytics.models import AnalyticsEvent

_TABLET = re.compile(r"ipad|tablet|android(?!.*mobile)", re.IGNORECASE)
_MOBILE = re.compile(r"mobile|android|iphone", re.IGNORECASE)

# Order matters: Edge and Opera UAs also contain "Chrome"; Chrome UAs contain "Safari".
_BROWSERS = [
    ("Edge", re.compile(r"edg(e|a|ios)?/", re.IGNORECASE)),
    ("Opera", re.compile(r"opr/|opera", re.IGNORECASE)),
    ("Chrome", re.compile(r"chrome|crios", re.IGNORECASE)),
    ("Firefox", re.compile(r"firefox|fxios", re.IGNORECASE)),
    ("Safari", re.compile(r"safari", re.IGNORECASE)),
]

# iOS before macOS (iPad UAs say "Mac OS X"), Android before Linux.
_SYSTEMS = [
    ("Windows", re.compile(r"windows", re.IGNORECASE)),
    ("iOS", re.compile(r"iphone|ipad|ipod", re.IGNORECASE)),
    ("macOS", re.compile(r"mac os x|macintosh", re.IGNORECASE)),
    ("Android", re.compile(r"android", re.IGNORECASE)),
    ("Linux", re.compile(r"linux", re.IGNORECASE)),
]


def _first_match(rules, ua: str) -> str:
    for label, pattern in rules:
        if pattern.search(ua):
            return label
    return "Unknown"


def parse_user_agent(ua: str | None) -> dict:
    ua = (ua or "").strip()
    if not ua:
        return {"device_type": AnalyticsEvent.DEVICE_UNKNOWN, "browser": "Unknown", "os": "Unknown"}

    if _TABLET.search(ua):
        device = AnalyticsEvent.DEVICE_TABLET
    elif _MOBILE.search(ua):
        device = AnalyticsEvent.DEVICE_MOBILE
    else:
        device = AnalyticsEvent.DEVICE_DESKTOP

    return {
        "device_type": device,
        "browser": _first_match(_BROWSERS, ua),
        "os": _first_match(_SYSTEMS, ua),
    }
