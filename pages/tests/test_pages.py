# pages/tests/test_pages.py

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from pages.models import HomeContent, Page
from permissions.roles import ROLE_ADMIN

User = get_user_model()


class PageApiTests(TestCase):
    """
    GUARANTEES:
    - Public reads only see active pages (404 "صفحه یافت نشد" otherwise)
    - PUT/PATCH upserts by slug and records updated_by
    - Writes are admin-only
    """

    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="admin@example.com", password="pass12345", role=ROLE_ADMIN)
        self.customer = User.objects.create_user(email="c@example.com", password="pass12345")

        self.about = Page.objects.create(
            slug="about",
            title="About us",
            sections=[{"id": "s1", "type": "text", "title": "Story", "content": "Since 2012", "items": [], "order": 0}],
        )
        Page.objects.create(slug="draft", title="Draft", is_active=False)

    def test_public_get_active_page(self):
        res = self.client.get("/api/pages/about/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["data"]["title"], "About us")

    def test_inactive_page_is_404(self):
        res = self.client.get("/api/pages/draft/")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["message"], "صفحه یافت نشد")

    def test_admin_lists_all_pages(self):
        self.client.force_authenticate(user=self.admin)
        res = self.client.get("/api/pages/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual({p["slug"] for p in res.data["data"]}, {"about", "draft"})

    def test_customer_cannot_create(self):
        self.client.force_authenticate(user=self.customer)
        res = self.client.post("/api/pages/", {"slug": "faq", "title": "FAQ"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_creates_page(self):
        self.client.force_authenticate(user=self.admin)
        res = self.client.post(
            "/api/pages/",
            {
                "slug": "FAQ",
                "title": "FAQ",
                "sections": [{"id": "q1", "type": "faq", "title": "Returns?", "content": "7 days"}],
                "seo": {"meta_title": "FAQ", "meta_description": "Questions"},
            },
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertEqual(res.data["data"]["slug"], "faq")
        self.assertEqual(str(res.data["data"]["updated_by"]), str(self.admin.id))

    def test_invalid_section_type_rejected(self):
        self.client.force_authenticate(user=self.admin)
        res = self.client.post(
            "/api/pages/",
            {"slug": "bad", "title": "Bad", "sections": [{"id": "x", "type": "video", "title": "t", "content": ""}]},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_put_updates_existing_page(self):
        self.client.force_authenticate(user=self.admin)
        res = self.client.patch("/api/pages/about/", {"subtitle": "Who we are"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_200_OK, res.data)
        self.about.refresh_from_db()
        self.assertEqual(self.about.subtitle, "Who we are")
        self.assertEqual(self.about.updated_by, self.admin)

    def test_put_creates_missing_page(self):
        self.client.force_authenticate(user=self.admin)
        res = self.client.put("/api/pages/shipping-policy/", {"title": "Shipping policy"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertTrue(Page.objects.filter(slug="shipping-policy").exists())


class HomeContentApiTests(TestCase):
    """
    GUARANTEES:
    - First read creates the singleton from defaults
    - PUT replaces only the supplied keys
    """

    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="admin@example.com", password="pass12345", role=ROLE_ADMIN)

    def test_get_creates_defaults(self):
        res = self.client.get("/api/pages/home-content/")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(HomeContent.objects.count(), 1)
        self.assertTrue(res.data["data"]["hero"]["title"])
        self.assertTrue(res.data["data"]["trust_signals"])

        self.client.get("/api/pages/home-content/")
        self.assertEqual(HomeContent.objects.count(), 1)

    def test_put_updates_only_supplied_keys(self):
        self.client.get("/api/pages/home-content/")
        before = HomeContent.objects.get()

        self.client.force_authenticate(user=self.admin)
        res = self.client.put(
            "/api/pages/home-content/",
            {"testimonials": [{"id": "t9", "name": "Ali", "text": "Great lamp"}]},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK, res.data)
        after = HomeContent.objects.get()
        self.assertEqual(after.testimonials[0]["id"], "t9")
        self.assertEqual(after.hero, before.hero)

    def test_put_requires_admin(self):
        res = self.client.put("/api/pages/home-content/", {"hero": {}}, format="json")
        self.assertIn(res.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

    def test_put_rejects_non_list(self):
        self.client.force_authenticate(user=self.admin)
        res = self.client.put("/api/pages/home-content/", {"spotlights": "nope"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
