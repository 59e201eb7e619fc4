# shipping/tests/test_shipping.py

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from shipping.models import ShippingMethod

User = get_user_model()


class ShippingCostTests(TestCase):
    def test_free_over_threshold(self):
        method = ShippingMethod.objects.create(
            name="Courier", price=Decimal("80000"), free_threshold=Decimal("2000000")
        )
        self.assertEqual(method.shipping_cost_for(Decimal("2000000")), Decimal("0.00"))
        self.assertEqual(method.shipping_cost_for(Decimal("1999999")), Decimal("80000"))

    def test_no_threshold_always_charges(self):
        method = ShippingMethod.objects.create(name="Post", price=Decimal("45000"))
        self.assertEqual(method.shipping_cost_for(Decimal("99999999")), Decimal("45000"))


class ShippingMethodApiTests(TestCase):
    """
    GUARANTEES:
    - Responses use {success, data, message}
    - Public list sorts by order and can be limited to active methods
    - Writes are admin only
    """

    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(
            email="admin@example.com", password="pass12345", role="admin"
        )
        self.express = ShippingMethod.objects.create(name="Express", price=Decimal("150000"), order=2)
        self.post = ShippingMethod.objects.create(name="Post", price=Decimal("45000"), order=1)
        self.off = ShippingMethod.objects.create(name="Pickup", price=Decimal("0"), order=0, is_active=False)

    def test_public_list_active_sorted(self):
        res = self.client.get("/api/shipping-methods/", {"active": "true"})
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertTrue(res.data["success"])
        self.assertEqual([m["name"] for m in res.data["data"]], ["Post", "Express"])

    def test_public_list_all(self):
        res = self.client.get("/api/shipping-methods/")
        self.assertEqual(len(res.data["data"]), 3)

    def test_retrieve_missing(self):
        res = self.client.get("/api/shipping-methods/00000000-0000-0000-0000-000000000000/")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["message"], "Shipping method not found")

    def test_create_requires_admin(self):
        res = self.client.post("/api/shipping-methods/", {"name": "Bike", "price": "30000"}, format="json")
        self.assertIn(res.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

    def test_admin_create_update_delete(self):
        self.client.force_authenticate(self.admin)

        res = self.client.post("/api/shipping-methods/", {"name": "Bike", "price": "30000"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["message"], "Shipping method created successfully")
        method_id = res.data["data"]["id"]

        res = self.client.patch(f"/api/shipping-methods/{method_id}/", {"eta": "1-2 days"}, format="json")
        self.assertEqual(res.data["message"], "Shipping method updated successfully")
        self.assertEqual(res.data["data"]["eta"], "1-2 days")

        res = self.client.delete(f"/api/shipping-methods/{method_id}/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["message"], "Shipping method deleted successfully")

    def test_reorder(self):
        self.client.force_authenticate(self.admin)
        res = self.client.put(
            "/api/shipping-methods/reorder/",
            {"methods": [{"id": str(self.express.id), "order": 0}, {"id": str(self.post.id), "order": 5}]},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["message"], "Shipping methods reordered successfully")

        self.post.refresh_from_db()
        self.assertEqual(self.post.order, 5)
