# analytics/tests/test_reports.py

from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from analytics.models import AnalyticsEvent
from orders.models import Order, OrderItem
from permissions.roles import ROLE_ADMIN

User = get_user_model()


def hit(path, session, event_type=AnalyticsEvent.TYPE_PAGEVIEW, **fields):
    return AnalyticsEvent.objects.create(
        type=event_type,
        url=f"https://shop.example.com{path}",
        path=path,
        session_id=session,
        **fields,
    )


def paid_order(total, items, payment_status=Order.PAYMENT_PAID):
    order = Order.objects.create(
        customer_email="buyer@example.com",
        customer_phone="09120000000",
        subtotal_amount=Decimal(total),
        total_amount=Decimal(total),
        payment_status=payment_status,
    )
    for title, price, qty in items:
        OrderItem.objects.create(order=order, title=title, unit_price=Decimal(price), quantity=qty)
    return order


class AnalyticsReportTests(TestCase):
    """
    GUARANTEES:
    - Reports are admin only
    - Overview counts page views, distinct sessions and clicks in the window
    - Sales revenue and top products only count paid orders
    """

    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="admin@example.com", password="pass12345", role=ROLE_ADMIN)
        self.shopper = User.objects.create_user(email="u@example.com", password="pass12345")

        hit("/", "a", device_type="mobile", browser="Safari")
        hit("/", "b", device_type="desktop", browser="Chrome")
        hit("/products", "a", device_type="mobile", browser="Safari")
        hit("/", "a", event_type=AnalyticsEvent.TYPE_CLICK)
        hit("/old", "c", timestamp=timezone.now() - timedelta(days=30))

    def test_requires_admin(self):
        self.assertEqual(self.client.get("/api/analytics/overview/").status_code, status.HTTP_401_UNAUTHORIZED)

        self.client.force_authenticate(user=self.shopper)
        self.assertEqual(self.client.get("/api/analytics/overview/").status_code, status.HTTP_403_FORBIDDEN)

    def test_overview(self):
        self.client.force_authenticate(user=self.admin)
        res = self.client.get("/api/analytics/overview/?days=7")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["total_page_views"], 3)
        self.assertEqual(res.data["unique_visitors"], 2)
        self.assertEqual(res.data["total_clicks"], 1)
        self.assertEqual(res.data["device_breakdown"], {"mobile": 2, "desktop": 1})
        self.assertEqual(res.data["top_pages"][0]["path"], "/")
        self.assertEqual(res.data["top_pages"][0]["views"], 2)
        self.assertEqual(sum(p["views"] for p in res.data["page_views_over_time"]), 3)

    def test_popular_pages_and_lists(self):
        self.client.force_authenticate(user=self.admin)

        res = self.client.get("/api/analytics/popular-pages/?limit=1")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data["data"]), 1)
        self.assertEqual(res.data["data"][0]["path"], "/")

        res = self.client.get("/api/analytics/pageviews/")
        self.assertEqual(res.data["count"], 4)

        res = self.client.get("/api/analytics/clicks/")
        self.assertEqual(res.data["count"], 1)

    def test_sales_dashboard(self):
        paid_order("300000", [("Mug", "50000", 2), ("Vase", "200000", 1)])
        paid_order("100000", [("Mug", "50000", 2)])
        paid_order("999000", [("Lamp", "999000", 1)], payment_status=Order.PAYMENT_PENDING)

        self.client.force_authenticate(user=self.admin)
        res = self.client.get("/api/analytics/sales/?days=30")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["total_orders"], 3)
        self.assertEqual(res.data["paid_orders"], 2)
        self.assertEqual(res.data["revenue"], "400000.00")
        self.assertEqual(res.data["average_order_value"], "200000.00")
        self.assertEqual(res.data["orders_by_status"], {"paid": 2, "pending": 1, "failed": 0})

        top = res.data["top_products"]
        self.assertEqual(top[0]["title"], "Mug")
        self.assertEqual(top[0]["quantity"], 4)
        self.assertEqual(top[0]["revenue"], "200000.00")
        self.assertNotIn("Lamp", [p["title"] for p in top])
