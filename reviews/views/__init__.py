from .review import ReviewViewSet

__all__ = ["ReviewViewSet"]
