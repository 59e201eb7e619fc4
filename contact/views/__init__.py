from .contact import ContactMessageViewSet

__all__ = ["ContactMessageViewSet"]
