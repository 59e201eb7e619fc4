# contact/models/contact_message.py

import uuid

from django.db import models


class ContactMessage(models.Model):
    """Message submitted through the storefront contact form."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=32, blank=True, default="")
    subject = models.CharField(max_length=255)
    message = models.TextField()

    is_read = models.BooleanField(default=False, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.subject} <{self.email}>"
