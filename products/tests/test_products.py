# products/tests/test_products.py

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.db import IntegrityError
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from products.models import Category, Product

User = get_user_model()


class ProductModelTests(TestCase):
    """
    Product model tests.

    GUARANTEES:
    - Products can be created safely
    - SKU uniqueness is enforced (and normalized to upper case)
    - Slugs are generated and kept unique
    """

    def test_product_creation(self):
        """A valid product should be created successfully."""
        product = Product.objects.create(
            title="Cast Iron Pan",
            sku="pan-28",
            base_price=Decimal("2450000.00"),
        )

        self.assertEqual(product.title, "Cast Iron Pan")
        self.assertEqual(product.sku, "PAN-28")
        self.assertEqual(product.slug, "cast-iron-pan")

    def test_sku_must_be_unique(self):
        """SKU duplication must be rejected."""
        Product.objects.create(title="Kettle", sku="KET-1", base_price=Decimal("100"))

        with self.assertRaises(IntegrityError):
            Product.objects.create(title="Kettle 2", sku="KET-1", base_price=Decimal("120"))

    def test_duplicate_titles_get_distinct_slugs(self):
        a = Product.objects.create(title="Desk Lamp", base_price=Decimal("100"))
        b = Product.objects.create(title="Desk Lamp", base_price=Decimal("100"))

        self.assertEqual(a.slug, "desk-lamp")
        self.assertEqual(b.slug, "desk-lamp-2")

    def test_available_quantity_untracked_is_none(self):
        product = Product.objects.create(title="Vase", base_price=Decimal("10"))
        self.assertIsNone(product.available_quantity())

    def test_available_quantity_subtracts_reserved(self):
        product = Product.objects.create(
            title="Towel",
            base_price=Decimal("10"),
            track_inventory=True,
            quantity=10,
            reserved=3,
            low_stock_threshold=7,
        )
        self.assertEqual(product.available_quantity(), 7)
        self.assertTrue(product.is_low_stock)

    def test_category_slug_generated_from_english_name(self):
        category = Category.objects.create(name="آشپزخانه", name_en="Kitchen & Dining")
        self.assertEqual(category.slug, "kitchen-dining")

    def test_category_slug_fallback_when_name_has_no_latin(self):
        category = Category.objects.create(name="روشنایی")
        self.assertTrue(category.slug.startswith("category-"))


class ProductApiTests(TestCase):
    """
    GUARANTEES:
    - Public list returns only active products in {count, results}
    - Filters: category slug, on_sale, search, sort, limit
    - sort=price orders by the sale price while a product is on sale
    - Detail resolves by id or slug
    - Writes require an admin (role or X-Admin-Key)
    - Category product_count follows product writes
    """

    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(
            email="admin@example.com", password="pass12345", role="admin"
        )
        self.customer = User.objects.create_user(
            email="shopper@example.com", password="pass12345"
        )

        self.kitchen = Category.objects.create(name="Kitchen", name_en="Kitchen")
        self.lighting = Category.objects.create(name="Lighting", name_en="Lighting")

        self.pan = Product.objects.create(
            title="Cast Iron Pan",
            base_price=Decimal("2000000"),
            sale_price=Decimal("1500000"),
            on_sale=True,
        )
        self.pan.categories.add(self.kitchen)

        self.lamp = Product.objects.create(title="Desk Lamp", base_price=Decimal("900000"))
        self.lamp.categories.add(self.lighting)

        self.hidden = Product.objects.create(
            title="Hidden Item", base_price=Decimal("10"), is_active=False
        )

    def test_public_list_only_active(self):
        res = self.client.get("/api/products/products/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["count"], 2)
        titles = {p["title"] for p in res.data["results"]}
        self.assertNotIn("Hidden Item", titles)

    def test_filter_by_category_slug(self):
        res = self.client.get("/api/products/products/", {"category": "kitchen"})
        self.assertEqual(res.data["count"], 1)
        self.assertEqual(res.data["results"][0]["title"], "Cast Iron Pan")

    def test_filter_on_sale_and_search(self):
        res = self.client.get("/api/products/products/", {"on_sale": "true"})
        self.assertEqual(res.data["count"], 1)

        res = self.client.get("/api/products/products/", {"search": "lamp"})
        self.assertEqual(res.data["count"], 1)
        self.assertEqual(res.data["results"][0]["title"], "Desk Lamp")

    def test_sort_by_price_uses_sale_price(self):
        Product.objects.filter(pk=self.pan.pk).update(sale_price=Decimal("500000"))

        res = self.client.get("/api/products/products/", {"sort": "price"})
        self.assertEqual([p["title"] for p in res.data["results"]], ["Cast Iron Pan", "Desk Lamp"])

        res = self.client.get("/api/products/products/", {"sort": "-price"})
        self.assertEqual([p["title"] for p in res.data["results"]], ["Desk Lamp", "Cast Iron Pan"])

    def test_sort_by_price_and_limit(self):
        res = self.client.get("/api/products/products/", {"sort": "price", "limit": 1})
        self.assertEqual(res.data["count"], 2)
        self.assertEqual(len(res.data["results"]), 1)
        self.assertEqual(res.data["results"][0]["title"], "Desk Lamp")

    def test_effective_price_and_discount_percent(self):
        res = self.client.get(f"/api/products/products/{self.pan.id}/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(Decimal(res.data["effective_price"]), Decimal("1500000"))
        self.assertEqual(res.data["discount_percent"], 25)

    def test_detail_by_slug(self):
        res = self.client.get("/api/products/products/desk-lamp/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["id"], str(self.lamp.id))

    def test_inactive_detail_is_404_for_public(self):
        res = self.client.get(f"/api/products/products/{self.hidden.id}/")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["code"], "NOT_FOUND")

    def test_customer_cannot_create_product(self):
        self.client.force_authenticate(self.customer)
        res = self.client.post(
            "/api/products/products/",
            {"title": "Rug", "base_price": "100.00"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_create_recounts_category(self):
        self.client.force_authenticate(self.admin)
        res = self.client.post(
            "/api/products/products/",
            {"title": "Chef Knife", "base_price": "500000.00", "category_ids": [str(self.kitchen.id)]},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

        self.kitchen.refresh_from_db()
        self.assertEqual(self.kitchen.product_count, 2)

    def test_admin_delete_recounts_category(self):
        self.client.force_authenticate(self.admin)
        res = self.client.delete(f"/api/products/products/{self.lamp.id}/")
        self.assertEqual(res.status_code, status.HTTP_204_NO_CONTENT)

        self.lighting.refresh_from_db()
        self.assertEqual(self.lighting.product_count, 0)

    def test_admin_key_header_grants_write(self):
        with self.settings(ADMIN_API_KEY="a-very-long-admin-key"):
            res = self.client.post(
                "/api/products/products/",
                {"title": "Mirror", "base_price": "300000.00"},
                format="json",
                HTTP_X_ADMIN_KEY="a-very-long-admin-key",
            )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

    def test_discount_preview_from_percent(self):
        self.client.force_authenticate(self.admin)
        res = self.client.post(
            "/api/products/products/discount-preview/",
            {"base_price": "1234000", "percent": "15"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        # 1,234,000 * 0.85 = 1,048,900 -> nearest 1,000
        self.assertEqual(Decimal(res.data["sale_price"]), Decimal("1049000"))
        self.assertEqual(res.data["percent"], 15)
        self.assertEqual(Decimal(res.data["savings"]), Decimal("185000"))


class CategoryApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        Category.objects.create(name="Kitchen", name_en="Kitchen", order=1, show_on_home=True)
        Category.objects.create(name="Decor", name_en="Decor", order=2)
        Category.objects.create(name="Old", name_en="Old", is_active=False)

    def test_public_list_active_in_order(self):
        res = self.client.get("/api/products/categories/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([c["slug"] for c in res.data], ["kitchen", "decor"])

    def test_home_filter(self):
        res = self.client.get("/api/products/categories/", {"home": "true"})
        self.assertEqual([c["slug"] for c in res.data], ["kitchen"])

    def test_retrieve_by_slug(self):
        res = self.client.get("/api/products/categories/decor/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["name"], "Decor")
