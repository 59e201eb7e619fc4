from decimal import Decimal

from django.core.management.base import BaseCommand

from products.models import Category, Product
from products.services.catalog import recount_categories


class Command(BaseCommand):
    help = "Seed storefront categories and a handful of home-goods products"

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding categories and products..."))

        # -------------------------------
        # CATEGORIES
        # -------------------------------
        categories = [
            ("آشپزخانه", "Kitchen", True),
            ("اتاق خواب", "Bedroom", True),
            ("روشنایی", "Lighting", True),
            ("دکوراسیون", "Decor", False),
            ("حمام", "Bathroom", False),
        ]

        category_objs = {}
        for order, (name, name_en, on_home) in enumerate(categories):
            obj, _ = Category.objects.get_or_create(
                slug=name_en.lower(),
                defaults={
                    "name": name,
                    "name_en": name_en,
                    "order": order,
                    "show_on_home": on_home,
                },
            )
            category_objs[name_en] = obj

        # -------------------------------
        # PRODUCTS
        # -------------------------------
        products_data = [
            ("KIT-PAN-28", "تابه چدنی ۲۸ سانتی", "Kitchen", 2450000, 1990000),
            ("KIT-KETTLE", "کتری برقی استیل", "Kitchen", 1850000, None),
            ("BED-DUVET-Q", "لحاف پنبه‌ای دونفره", "Bedroom", 3900000, 3400000),
            ("LGT-LAMP-01", "آباژور رومیزی چوبی", "Lighting", 1250000, None),
            ("DEC-VASE-M", "گلدان سرامیکی دست‌ساز", "Decor", 680000, 590000),
            ("BTH-TOWEL-SET", "ست حوله حمام", "Bathroom", 920000, None),
        ]

        for sku, title, cat, base, sale in products_data:
            product, created = Product.objects.get_or_create(
                sku=sku,
                defaults={
                    "title": title,
                    "base_price": Decimal(base),
                    "sale_price": Decimal(sale) if sale else None,
                    "on_sale": bool(sale),
                    "track_inventory": True,
                    "quantity": 25,
                },
            )
            if created:
                product.categories.add(category_objs[cat])

        recount_categories(Category.objects.values_list("id", flat=True))

        self.stdout.write(
            self.style.SUCCESS("✅ Categories and products seeded successfully.")
        )
