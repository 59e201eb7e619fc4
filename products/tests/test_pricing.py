# products/tests/test_pricing.py

from decimal import Decimal

from django.test import SimpleTestCase, TestCase

from products.models import Product
from products.services.exceptions import VariantNotFoundError
from products.services.pricing import (
    discount_percent,
    discount_preview,
    effective_price,
    sale_price_for_percent,
)


class DiscountDesignerTests(SimpleTestCase):
    """
    GUARANTEES:
    - percent <-> sale price conversions are stable
    - designed sale prices land on 1,000 steps and stay below base
    """

    def test_discount_percent_basic(self):
        self.assertEqual(discount_percent(Decimal("200000"), Decimal("150000")), 25)

    def test_discount_percent_zero_cases(self):
        self.assertEqual(discount_percent(Decimal("0"), Decimal("10")), 0)
        self.assertEqual(discount_percent(Decimal("100"), None), 0)
        self.assertEqual(discount_percent(Decimal("100"), Decimal("100")), 0)
        self.assertEqual(discount_percent(Decimal("100"), Decimal("150")), 0)

    def test_sale_price_rounds_to_thousand(self):
        self.assertEqual(sale_price_for_percent(Decimal("999999"), 10), Decimal("900000.00"))

    def test_sale_price_capped_below_base(self):
        # 1% of 1,200 rounds back to 1,000 steps; result must stay under base
        price = sale_price_for_percent(Decimal("1200"), 1)
        self.assertLess(price, Decimal("1200"))

    def test_sale_price_none_for_non_positive_percent(self):
        self.assertIsNone(sale_price_for_percent(Decimal("100000"), 0))
        self.assertIsNone(sale_price_for_percent(Decimal("100000"), -5))

    def test_preview_from_sale_price(self):
        preview = discount_preview(base_price="500000", sale_price="400000")
        self.assertEqual(preview["percent"], 20)
        self.assertEqual(preview["savings"], Decimal("100000.00"))

    def test_preview_sale_at_or_above_base_is_capped(self):
        preview = discount_preview(base_price="500000", sale_price="650000")
        self.assertEqual(preview["sale_price"], Decimal("499999.00"))
        self.assertEqual(preview["savings"], Decimal("1.00"))

    def test_percent_rounding_to_zero_means_no_sale(self):
        # 500 * 0.9 = 450 rounds to 0 on the 1,000 step
        self.assertIsNone(sale_price_for_percent(Decimal("500"), 10))
        self.assertIsNone(sale_price_for_percent(Decimal("400000"), 100))

    def test_preview_never_designs_a_free_product(self):
        for preview in (
            discount_preview(base_price="400000", sale_price="0"),
            discount_preview(base_price="400000", sale_price="-10"),
            discount_preview(base_price="400000", percent="100"),
        ):
            self.assertIsNone(preview["sale_price"])
            self.assertEqual(preview["percent"], 0)
            self.assertEqual(preview["savings"], Decimal("0.00"))


class EffectivePriceTests(TestCase):
    def setUp(self):
        self.product = Product.objects.create(
            title="Bedding Set",
            base_price=Decimal("3000000"),
            sale_price=Decimal("2500000"),
            on_sale=False,
            variants=[
                {"id": "single", "price": 2000000, "sale_price": 1800000, "on_sale": True},
                {"id": "double", "price": 3500000, "sale_price": 3000000, "on_sale": False},
            ],
        )

    def test_base_price_when_not_on_sale(self):
        self.assertEqual(effective_price(self.product), Decimal("3000000.00"))

    def test_sale_price_when_on_sale(self):
        self.product.on_sale = True
        self.assertEqual(effective_price(self.product), Decimal("2500000.00"))

    def test_variant_on_sale(self):
        self.assertEqual(effective_price(self.product, "single"), Decimal("1800000.00"))

    def test_variant_not_on_sale(self):
        self.assertEqual(effective_price(self.product, "double"), Decimal("3500000.00"))

    def test_unknown_variant_raises(self):
        with self.assertRaises(VariantNotFoundError):
            effective_price(self.product, "king")
