# permissions/roles.py

from __future__ import annotations

import hmac
from typing import Optional

from django.conf import settings
from rest_framework.permissions import BasePermission


# =========================================================
# ROLE CONSTANTS
# =========================================================
ROLE_ADMIN = "admin"
ROLE_CUSTOMER = "customer"

ROLE_CHOICES = [
    (ROLE_CUSTOMER, "Customer"),
    (ROLE_ADMIN, "Admin"),
]

# "user" is what older storefront clients send for a regular account.
ROLE_ALIASES = {
    "user": ROLE_CUSTOMER,
    ROLE_CUSTOMER: ROLE_CUSTOMER,
    ROLE_ADMIN: ROLE_ADMIN,
}

ADMIN_KEY_HEADER = "HTTP_X_ADMIN_KEY"


# =========================================================
# Helpers
# =========================================================
def get_user_role(user) -> Optional[str]:
    return getattr(user, "role", None)


def normalize_role(raw) -> Optional[str]:
    return ROLE_ALIASES.get(str(raw or "").strip().lower())


def is_admin_user(user) -> bool:
    if not user or not getattr(user, "is_authenticated", False):
        return False
    return get_user_role(user) == ROLE_ADMIN or bool(getattr(user, "is_superuser", False))


def has_valid_admin_key(request) -> bool:
    """
    X-Admin-Key header check.

    An empty ADMIN_API_KEY disables this path entirely.
    """
    expected = (getattr(settings, "ADMIN_API_KEY", "") or "").strip()
    if not expected:
        return False
    supplied = (request.META.get(ADMIN_KEY_HEADER) or "").strip()
    if not supplied:
        return False
    return hmac.compare_digest(supplied.encode(), expected.encode())


# =========================================================
# Permissions
# =========================================================
class IsAdminOrAdminKey(BasePermission):
    """
    Back-office gate.

    Passes when:
    - the authenticated user is an admin (role or superuser), OR
    - the X-Admin-Key header matches settings.ADMIN_API_KEY
    """

    message = "Unauthorized admin access"

    def has_permission(self, request, view):
        return is_admin_user(request.user) or has_valid_admin_key(request)
