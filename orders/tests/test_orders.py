# orders/tests/test_orders.py

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from notifications.models import Notification
from orders.models import Order, OrderItem
from permissions.roles import ROLE_ADMIN

User = get_user_model()


def make_order(*, user=None, email="guest@example.com", phone="09120000000", **fields):
    order = Order.objects.create(
        user=user,
        customer_name=fields.pop("customer_name", "Guest"),
        customer_email=email,
        customer_phone=phone,
        subtotal_amount=Decimal("100000"),
        total_amount=Decimal("100000"),
        **fields,
    )
    OrderItem.objects.create(order=order, title="Mug", unit_price=Decimal("50000"), quantity=2)
    return order


class OrderVisibilityTests(TestCase):
    """
    GUARANTEES:
    - Owned orders are visible to the owner and admins only
    - Guest orders are visible to anyone holding the id
    - Hidden / unknown orders return 404 "Order not found"
    - mine/ and lookup/ scope results correctly
    """

    def setUp(self):
        self.client = APIClient()
        self.owner = User.objects.create_user(email="owner@example.com", password="pass12345")
        self.other = User.objects.create_user(email="other@example.com", password="pass12345")
        self.admin = User.objects.create_user(email="admin@example.com", password="pass12345", role=ROLE_ADMIN)

        self.owned = make_order(user=self.owner, email="owner@example.com")
        self.guest = make_order()

    def test_owner_can_view_order(self):
        self.client.force_authenticate(user=self.owner)
        res = self.client.get(f"/api/orders/{self.owned.id}/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["order_number"], self.owned.order_number)

    def test_other_user_gets_404(self):
        self.client.force_authenticate(user=self.other)
        res = self.client.get(f"/api/orders/{self.owned.id}/")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["message"], "Order not found")

    def test_anonymous_cannot_view_owned_order(self):
        res = self.client.get(f"/api/orders/{self.owned.id}/")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_admin_can_view_any_order(self):
        self.client.force_authenticate(user=self.admin)
        res = self.client.get(f"/api/orders/{self.owned.id}/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)

    def test_guest_order_visible_to_anyone(self):
        res = self.client.get(f"/api/orders/{self.guest.id}/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)

    def test_unknown_order_is_404(self):
        res = self.client.get("/api/orders/00000000-0000-0000-0000-000000000000/")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_mine_lists_own_orders_filtered_by_status(self):
        make_order(user=self.owner, email="owner@example.com", payment_status=Order.PAYMENT_PAID)
        self.client.force_authenticate(user=self.owner)

        res = self.client.get("/api/orders/mine/")
        self.assertEqual(len(res.data["data"]), 2)

        res = self.client.get("/api/orders/mine/?status=paid")
        self.assertEqual(len(res.data["data"]), 1)
        self.assertEqual(res.data["data"][0]["payment_status"], "paid")

    def test_mine_requires_auth(self):
        res = self.client.get("/api/orders/mine/")
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_lookup_requires_matching_email_and_phone(self):
        res = self.client.post(
            "/api/orders/lookup/",
            {"email": "GUEST@example.com", "phone": "09120000000"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data["data"]), 1)

        res = self.client.post(
            "/api/orders/lookup/",
            {"email": "guest@example.com", "phone": "09129999999"},
            format="json",
        )
        self.assertEqual(res.data["data"], [])


class OrderAdminTests(TestCase):
    """
    GUARANTEES:
    - Admin search returns {data, meta{total, page, limit}}
    - Status / delivery / warranty updates persist and notify
    - Non-admins are rejected
    """

    def setUp(self):
        self.client = APIClient()
        self.owner = User.objects.create_user(email="owner@example.com", password="pass12345")
        self.admin = User.objects.create_user(email="admin@example.com", password="pass12345", role=ROLE_ADMIN)
        self.order = make_order(user=self.owner, email="owner@example.com", customer_name="Reza Karimi")
        make_order(email="someone@example.com", payment_status=Order.PAYMENT_PAID)
        self.client.force_authenticate(user=self.admin)

    def test_admin_list_envelope(self):
        res = self.client.get("/api/orders/admin/?limit=1")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["meta"], {"total": 2, "page": 1, "limit": 1})
        self.assertEqual(len(res.data["data"]), 1)

    def test_admin_list_search_and_filters(self):
        res = self.client.get("/api/orders/admin/?search=reza")
        self.assertEqual(res.data["meta"]["total"], 1)
        self.assertEqual(res.data["data"][0]["id"], str(self.order.id))

        res = self.client.get("/api/orders/admin/?payment_status=paid")
        self.assertEqual(res.data["meta"]["total"], 1)

    def test_non_admin_rejected(self):
        self.client.force_authenticate(user=self.owner)
        res = self.client.get("/api/orders/admin/")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_status_update_notifies_owner(self):
        res = self.client.patch(
            f"/api/orders/{self.order.id}/status/",
            {"payment_status": "paid", "fulfillment_status": "assigned", "payment_reference": "REF-1"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)

        self.order.refresh_from_db()
        self.assertEqual(self.order.payment_status, Order.PAYMENT_PAID)
        self.assertEqual(self.order.fulfillment_status, Order.FULFILLMENT_ASSIGNED)
        self.assertEqual(self.order.payment_reference, "REF-1")
        self.assertTrue(
            Notification.objects.filter(user=self.owner, type=Notification.TYPE_ORDER_UPDATE).exists()
        )

    def test_invalid_status_rejected(self):
        res = self.client.patch(f"/api/orders/{self.order.id}/status/", {"payment_status": "lost"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_notify_compiles_default_message(self):
        res = self.client.post(f"/api/orders/{self.order.id}/notify/", {}, format="json")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["to"], "owner@example.com")
        self.assertEqual(res.data["order_number"], self.order.order_number)
        self.assertIn(self.order.order_number, res.data["message"])
        self.assertIn("Mug", res.data["message"])

    def test_notify_custom_subject(self):
        res = self.client.post(
            f"/api/orders/{self.order.id}/notify/",
            {"subject": "Hello", "message": "Your order shipped"},
            format="json",
        )
        self.assertEqual(res.data["subject"], "Hello")
        self.assertEqual(res.data["message"], "Your order shipped")

    def test_delivery_update(self):
        res = self.client.patch(
            f"/api/orders/{self.order.id}/delivery/",
            {"message": "On the way", "tracking_code": "TRK-9", "credentials": "locker 12"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)

        self.order.refresh_from_db()
        self.assertEqual(self.order.delivery_info["tracking_code"], "TRK-9")
        self.assertEqual(self.order.delivery_info["updated_by"], str(self.admin.id))
        self.assertIn("delivered_at", self.order.delivery_info)
        self.assertEqual(self.order.delivery_credentials, "locker 12")

    def test_warranty_update(self):
        item = self.order.items.first()
        res = self.client.patch(
            f"/api/orders/{self.order.id}/items/{item.id}/warranty/",
            {"status": "active", "start_date": "2026-01-01", "end_date": "2027-01-01"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK, res.data)

        item.refresh_from_db()
        self.assertEqual(item.warranty["status"], "active")
        self.assertEqual(item.warranty["end_date"], "2027-01-01")

    def test_warranty_rejects_end_before_start(self):
        item = self.order.items.first()
        res = self.client.patch(
            f"/api/orders/{self.order.id}/items/{item.id}/warranty/",
            {"status": "active", "start_date": "2026-01-01", "end_date": "2025-01-01"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)


class AcknowledgeDeliveryTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.owner = User.objects.create_user(email="owner@example.com", password="pass12345")
        self.other = User.objects.create_user(email="other@example.com", password="pass12345")
        self.order = make_order(user=self.owner, email="owner@example.com")

    def test_owner_acknowledges(self):
        self.client.force_authenticate(user=self.owner)
        res = self.client.post(f"/api/orders/{self.order.id}/acknowledge/")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertTrue(res.data["customer_acknowledged"])
        self.assertIsNotNone(res.data["customer_acknowledged_at"])

    def test_other_user_cannot_acknowledge(self):
        self.client.force_authenticate(user=self.other)
        res = self.client.post(f"/api/orders/{self.order.id}/acknowledge/")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
