# contact/services/contact.py

"""
CONTACT FORM

- persist the message
- email the store admins (best effort)
- email a short confirmation to the sender (best effort)
"""

import logging

from django.conf import settings

from contact.models import ContactMessage
from notifications.services import notify_admins, send_email

logger = logging.getLogger(__name__)


def submit_contact_message(*, name, email, subject, message, phone="") -> ContactMessage:
    contact = ContactMessage.objects.create(
        name=name.strip(),
        email=email.strip().lower(),
        phone=(phone or "").strip(),
        subject=subject.strip(),
        message=message.strip(),
    )

    logger.info("Contact message received", extra={"contact_id": str(contact.pk)})

    notify_admins(
        subject=f"[{settings.STORE_NAME}] پیام جدید: {contact.subject}",
        message=(
            f"نام: {contact.name}\n"
            f"ایمیل: {contact.email}\n"
            f"تلفن: {contact.phone or '-'}\n\n"
            f"{contact.message}"
        ),
    )
    send_email(
        to=contact.email,
        subject=f"پیام شما به {settings.STORE_NAME} دریافت شد",
        message=(
            f"{contact.name} عزیز،\n\n"
            "پیام شما دریافت شد و به زودی پاسخ خواهیم داد.\n\n"
            f"تیم {settings.STORE_NAME}"
        ),
    )
    return contact
