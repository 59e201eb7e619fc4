# banners/tests/test_banners.py

from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from banners.models import Banner
from permissions.roles import ROLE_ADMIN

User = get_user_model()


def make_banner(name, **fields):
    data = {
        "type": "promotional",
        "layout": "centered",
        "background": {"type": "solid", "color": "#fff"},
        "elements": [{"type": "text", "content": name}],
    }
    data.update(fields)
    return Banner.objects.create(name=name, **data)


class BannerTargetingTests(TestCase):
    """
    GUARANTEES:
    - Only active banners for the page (or "all") are returned, by priority
    - Date window, audience, role and view/click caps are enforced
    """

    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="u@example.com", password="pass12345")

    def _names(self, page="home"):
        res = self.client.get(f"/api/banners/page/{page}/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        return [b["name"] for b in res.data]

    def test_page_and_priority(self):
        make_banner("low", priority=1)
        make_banner("high", priority=10)
        make_banner("everywhere", display_on=["all"], priority=5)
        make_banner("products-only", display_on=["products"])
        make_banner("off", active=False)

        self.assertEqual(self._names(), ["high", "everywhere", "low"])
        self.assertEqual(self._names("products"), ["everywhere", "products-only"])

    def test_date_window(self):
        now = timezone.now()
        make_banner("future", display_rules={"start_date": (now + timedelta(days=1)).isoformat()})
        make_banner("past", display_rules={"end_date": (now - timedelta(days=1)).isoformat()})
        make_banner("current", display_rules={"start_date": (now - timedelta(days=1)).isoformat()})

        self.assertEqual(self._names(), ["current"])

    def test_audience_rules(self):
        make_banner("members", display_rules={"show_to_users": ["authenticated"]})
        make_banner("guests", display_rules={"show_to_users": ["guest"]})

        self.assertEqual(self._names(), ["guests"])

        self.client.force_authenticate(user=self.user)
        self.assertEqual(self._names(), ["members"])

    def test_role_rules(self):
        make_banner("admins", display_rules={"show_to_roles": ["admin"]})
        make_banner("shoppers", display_rules={"show_to_roles": ["user"]})

        self.client.force_authenticate(user=self.user)
        self.assertEqual(self._names(), ["shoppers"])

    def test_caps(self):
        make_banner("seen", views=5, display_rules={"max_views": 5})
        make_banner("clicked", clicks=2, display_rules={"max_clicks": 3})

        self.assertEqual(self._names(), ["clicked"])

    def test_view_and_click_counters(self):
        banner = make_banner("promo")

        self.client.post(f"/api/banners/{banner.id}/view/")
        self.client.post(f"/api/banners/{banner.id}/view/")
        res = self.client.post(f"/api/banners/{banner.id}/click/")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        banner.refresh_from_db()
        self.assertEqual(banner.views, 2)
        self.assertEqual(banner.clicks, 1)

    def test_tracking_unknown_banner(self):
        res = self.client.post("/api/banners/00000000-0000-0000-0000-000000000000/view/")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["message"], "بنر یافت نشد")


class BannerAdminTests(TestCase):
    """
    GUARANTEES:
    - CRUD is admin-only
    - Enum + structure validation on type, layout, background, elements
    """

    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="admin@example.com", password="pass12345", role=ROLE_ADMIN)
        self.client.force_authenticate(user=self.admin)

    def _payload(self, **overrides):
        data = {
            "name": "Autumn sale",
            "type": "hero",
            "layout": "split",
            "background": {"type": "gradient", "gradient_colors": ["#f97316", "#facc15"]},
            "elements": [{"type": "button", "content": "Shop", "href": "/products"}],
            "display_on": ["home", "products"],
        }
        data.update(overrides)
        return data

    def test_create_banner(self):
        res = self.client.post("/api/banners/", self._payload(), format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertEqual(res.data["display_on"], ["home", "products"])

    def test_invalid_layout(self):
        res = self.client.post("/api/banners/", self._payload(layout="diagonal"), format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("layout", res.data)

    def test_invalid_background_type(self):
        res = self.client.post("/api/banners/", self._payload(background={"type": "pattern"}), format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("background", res.data)

    def test_elements_must_be_objects(self):
        res = self.client.post("/api/banners/", self._payload(elements=["text"]), format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_caps_must_be_non_negative_integers(self):
        for rules in ({"max_views": "abc"}, {"max_clicks": -1}, {"max_views": 2.5}, {"max_clicks": True}):
            res = self.client.post("/api/banners/", self._payload(display_rules=rules), format="json")
            self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST, rules)
            self.assertIn("display_rules", res.data)
        self.assertFalse(Banner.objects.exists())

        res = self.client.post(
            "/api/banners/", self._payload(display_rules={"max_views": 3, "max_clicks": None}), format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)

    def test_roles_must_be_known(self):
        res = self.client.post(
            "/api/banners/", self._payload(display_rules={"show_to_roles": ["owner"]}), format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

        res = self.client.post(
            "/api/banners/", self._payload(display_rules={"show_to_roles": ["user", "admin"]}), format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertEqual(res.data["display_rules"]["show_to_roles"], ["admin", "customer"])

    def test_stored_bad_cap_does_not_break_page(self):
        make_banner("legacy", display_rules={"max_views": "abc"})
        self.client.force_authenticate(user=None)

        res = self.client.get("/api/banners/page/home/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([b["name"] for b in res.data], ["legacy"])

    def test_list_active_filter(self):
        make_banner("on")
        make_banner("off", active=False)

        res = self.client.get("/api/banners/?active=true")
        self.assertEqual([b["name"] for b in res.data], ["on"])

        res = self.client.get("/api/banners/")
        self.assertEqual(len(res.data), 2)

    def test_retrieve_unknown(self):
        res = self.client.get("/api/banners/00000000-0000-0000-0000-000000000000/")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["message"], "بنر یافت نشد")

    def test_customer_cannot_create(self):
        customer = User.objects.create_user(email="c@example.com", password="pass12345")
        self.client.force_authenticate(user=customer)
        res = self.client.post("/api/banners/", self._payload(), format="json")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
