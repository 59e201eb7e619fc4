# users/urls.py

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import AdminUserViewSet, LoginView, MeView, RegisterView

app_name = "users"

router = DefaultRouter()
router.register(r"users", AdminUserViewSet, basename="admin-users")

urlpatterns = [
    # ---------------- PUBLIC AUTH ----------------
    path("register/", RegisterView.as_view(), name="register"),
    path("login/", LoginView.as_view(), name="login"),
    # ---------------- AUTHENTICATED ----------------
    path("me/", MeView.as_view(), name="me"),
    # ---------------- ADMIN ----------------
    path("", include(router.urls)),
]
