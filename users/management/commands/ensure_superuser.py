"""
PATH: users/management/commands/ensure_superuser.py

Deploy-time admin bootstrap.

- Reads AUTO_ADMIN_EMAIL + AUTO_ADMIN_PASSWORD from env.
- Idempotent: creates the admin if missing; otherwise re-asserts admin role,
  superuser flags and the env password.
- Does NOT print the password.
"""

from __future__ import annotations

import os

from django.core.management.base import BaseCommand
from django.db import transaction

from permissions.roles import ROLE_ADMIN
from users.models import User


class Command(BaseCommand):
    help = "Create/update the storefront admin account from env vars (idempotent)."

    def handle(self, *args, **options):
        email = (os.environ.get("AUTO_ADMIN_EMAIL") or "").strip().lower()
        password = (os.environ.get("AUTO_ADMIN_PASSWORD") or "").strip()

        if not email or not password:
            self.stdout.write(self.style.WARNING("AUTO_ADMIN_* env vars not set. Skipping."))
            return

        with transaction.atomic():
            user = User.objects.filter(email__iexact=email).first()

            if user:
                user.role = ROLE_ADMIN
                user.is_active = True
                user.is_staff = True
                user.is_superuser = True
                user.set_password(password)
                user.save()
                self.stdout.write(self.style.SUCCESS(f"Admin ensured: {email} (updated)"))
                return

            User.objects.create_superuser(email=email, password=password)

        self.stdout.write(self.style.SUCCESS(f"Admin ensured: {email} (created)"))
