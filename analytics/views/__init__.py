from .analytics import AnalyticsViewSet

__all__ = ["AnalyticsViewSet"]
