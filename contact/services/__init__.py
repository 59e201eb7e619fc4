from .contact import submit_contact_message
from .exceptions import ContactMessageNotFoundError, ContactValidationError

__all__ = [
    "ContactMessageNotFoundError",
    "ContactValidationError",
    "submit_contact_message",
]
