# products/tests/test_price_alerts.py

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from notifications.models import Notification
from products.models import PriceAlert, Product

User = get_user_model()


class PriceAlertApiTests(TestCase):
    """
    GUARANTEES:
    - Alerts are owner-scoped (foreign alert = 404)
    - An active alert with target <= new target blocks the new one
    - Lowering a product's price fires matching alerts exactly once
    """

    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="shopper@example.com", password="pass12345")
        self.other = User.objects.create_user(email="other@example.com", password="pass12345")
        self.admin = User.objects.create_user(
            email="admin@example.com", password="pass12345", role="admin"
        )
        self.product = Product.objects.create(title="Sofa", base_price=Decimal("10000000"))

    def _create(self, target, user=None):
        self.client.force_authenticate(user or self.user)
        return self.client.post(
            "/api/products/price-alerts/",
            {"product": str(self.product.id), "target_price": str(target)},
            format="json",
        )

    def test_create_defaults_destination_to_email(self):
        res = self._create("8000000")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["destination"], "shopper@example.com")
        self.assertEqual(res.data["channel"], "email")

    def test_requires_auth(self):
        res = APIClient().post(
            "/api/products/price-alerts/",
            {"product": str(self.product.id), "target_price": "1"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_duplicate_with_lower_target_rejected(self):
        self.assertEqual(self._create("8000000").status_code, status.HTTP_201_CREATED)

        res = self._create("9000000")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["code"], "DUPLICATE_PRICE_ALERT")

    def test_lower_target_than_existing_is_allowed(self):
        self._create("8000000")
        res = self._create("7000000")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

    def test_foreign_alert_is_404(self):
        res = self._create("8000000")
        alert_id = res.data["id"]

        self.client.force_authenticate(self.other)
        res = self.client.get(f"/api/products/price-alerts/{alert_id}/")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_price_drop_fires_alert(self):
        self._create("8000000")
        self._create("5000000", user=self.other)

        self.client.force_authenticate(self.admin)
        res = self.client.patch(
            f"/api/products/products/{self.product.id}/",
            {"sale_price": "7500000.00", "on_sale": True},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)

        fired = PriceAlert.objects.get(user=self.user)
        self.assertFalse(fired.active)
        self.assertIsNotNone(fired.triggered_at)

        waiting = PriceAlert.objects.get(user=self.other)
        self.assertTrue(waiting.active)

        self.assertEqual(
            Notification.objects.filter(user=self.user, type=Notification.TYPE_PRICE_ALERT).count(),
            1,
        )

    def test_price_increase_does_not_fire(self):
        self._create("20000000")

        self.client.force_authenticate(self.admin)
        self.client.patch(
            f"/api/products/products/{self.product.id}/",
            {"base_price": "12000000.00"},
            format="json",
        )
        self.assertTrue(PriceAlert.objects.get(user=self.user).active)

    def test_list_shows_active_only(self):
        self._create("8000000")
        PriceAlert.objects.filter(user=self.user).update(active=False)

        res = self.client.get("/api/products/price-alerts/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data), 0)
