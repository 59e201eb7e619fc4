from .event import AnalyticsEvent

__all__ = [
    "AnalyticsEvent",
]
