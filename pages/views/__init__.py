from .page import PageViewSet

__all__ = ["PageViewSet"]
