from .notify import notify, notify_admins, send_email

__all__ = [
    "notify",
    "notify_admins",
    "send_email",
]
