from .admin_users import AdminUserViewSet
from .auth import LoginView, RegisterView
from .me import MeView

__all__ = [
    "AdminUserViewSet",
    "RegisterView",
    "LoginView",
    "MeView",
]
