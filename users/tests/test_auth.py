# users/tests/test_auth.py

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from permissions.roles import ROLE_CUSTOMER

User = get_user_model()

PASSWORD = "Sturdy-Pass-2024"


class RegisterLoginTests(TestCase):
    """
    GUARANTEES:
    - Registration always creates a customer and returns a JWT pair
    - Emails are unique case-insensitively
    - Login reports bad credentials (400) and disabled accounts (403)
    """

    def setUp(self):
        self.client = APIClient()

    def _register(self, **overrides):
        payload = {
            "email": "Sara@Example.com",
            "password": PASSWORD,
            "first_name": "Sara",
            "last_name": "Ahmadi",
            "phone": "09121234567",
        }
        payload.update(overrides)
        return self.client.post("/api/auth/register/", payload, format="json")

    def test_register_returns_tokens_and_customer(self):
        res = self._register(role="admin")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertIn("access", res.data)
        self.assertIn("refresh", res.data)
        self.assertEqual(res.data["user"]["role"], ROLE_CUSTOMER)
        self.assertEqual(res.data["user"]["email"], "sara@example.com")
        self.assertEqual(res.data["user"]["name"], "Sara Ahmadi")

    def test_duplicate_email_rejected(self):
        self._register()
        res = self._register(email="SARA@example.com")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(User.objects.count(), 1)

    def test_login(self):
        self._register()
        res = self.client.post(
            "/api/auth/login/",
            {"email": "sara@EXAMPLE.com", "password": PASSWORD},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(set(res.data), {"access", "refresh", "user"})

    def test_login_wrong_password(self):
        self._register()
        res = self.client.post(
            "/api/auth/login/",
            {"email": "sara@example.com", "password": "nope-nope"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["detail"], "Invalid email or password")

    def test_login_disabled_account(self):
        User.objects.create_user(email="gone@example.com", password=PASSWORD, is_active=False)
        res = self.client.post(
            "/api/auth/login/",
            {"email": "gone@example.com", "password": PASSWORD},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_jwt_create_and_me(self):
        User.objects.create_user(email="jwt@example.com", password=PASSWORD)
        res = self.client.post(
            "/api/auth/jwt/create/",
            {"email": "jwt@example.com", "password": PASSWORD},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK, res.data)

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {res.data['access']}")
        me = self.client.get("/api/auth/me/")
        self.assertEqual(me.status_code, status.HTTP_200_OK)
        self.assertEqual(me.data["user"]["email"], "jwt@example.com")


class MeTests(TestCase):
    """
    GUARANTEES:
    - /me requires auth
    - PATCH /me updates name + phone only; email and role stay read-only
    """

    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="me@example.com", password=PASSWORD)

    def test_requires_auth(self):
        self.assertEqual(self.client.get("/api/auth/me/").status_code, status.HTTP_401_UNAUTHORIZED)

    def test_patch_profile(self):
        self.client.force_authenticate(user=self.user)
        res = self.client.patch(
            "/api/auth/me/",
            {"first_name": "Reza", "phone": "09350000000", "role": "admin", "email": "x@example.com"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)

        self.user.refresh_from_db()
        self.assertEqual(self.user.first_name, "Reza")
        self.assertEqual(self.user.phone, "09350000000")
        self.assertEqual(self.user.role, ROLE_CUSTOMER)
        self.assertEqual(self.user.email, "me@example.com")
