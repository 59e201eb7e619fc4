import uuid
from decimal import Decimal

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Category",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=120)),
                ("name_en", models.CharField(blank=True, default="", max_length=120)),
                ("slug", models.SlugField(allow_unicode=True, max_length=140, unique=True)),
                ("description", models.TextField(blank=True, default="")),
                ("seo_description", models.CharField(blank=True, default="", max_length=300)),
                ("seo_keywords", models.JSONField(blank=True, default=list)),
                ("image_url", models.CharField(blank=True, default="", max_length=500)),
                ("icon", models.CharField(blank=True, default="", max_length=64)),
                ("order", models.IntegerField(default=0)),
                ("is_active", models.BooleanField(default=True)),
                ("show_on_home", models.BooleanField(default=False)),
                ("product_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "parent",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="children",
                        to="products.category",
                    ),
                ),
            ],
            options={
                "ordering": ["order", "name"],
                "verbose_name_plural": "categories",
            },
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(db_index=True, max_length=255)),
                ("slug", models.SlugField(allow_unicode=True, max_length=280, unique=True)),
                ("description", models.TextField(blank=True, default="")),
                ("detailed_description", models.TextField(blank=True, default="")),
                ("tags", models.JSONField(blank=True, default=list)),
                ("base_price", models.DecimalField(decimal_places=2, max_digits=12)),
                ("sale_price", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("on_sale", models.BooleanField(default=False)),
                ("featured", models.BooleanField(default=False)),
                ("rating", models.DecimalField(decimal_places=1, default=Decimal("0.0"), max_digits=2)),
                (
                    "product_type",
                    models.CharField(
                        choices=[
                            ("physical_product", "Physical product"),
                            ("digital_product", "Digital product"),
                            ("service", "Service"),
                        ],
                        default="physical_product",
                        max_length=32,
                    ),
                ),
                ("custom_fields", models.JSONField(blank=True, default=dict)),
                ("cover_url", models.CharField(blank=True, default="", max_length=500)),
                ("gallery", models.JSONField(blank=True, default=list)),
                ("track_inventory", models.BooleanField(default=False)),
                ("quantity", models.PositiveIntegerField(default=0)),
                ("reserved", models.PositiveIntegerField(default=0)),
                ("low_stock_threshold", models.PositiveIntegerField(default=5)),
                ("sku", models.CharField(blank=True, max_length=128, null=True, unique=True)),
                ("requires_shipping", models.BooleanField(default=True)),
                ("weight", models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ("dimensions", models.JSONField(blank=True, default=dict)),
                ("shipping_cost", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                (
                    "free_shipping_threshold",
                    models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True),
                ),
                ("options", models.JSONField(blank=True, default=list)),
                ("variants", models.JSONField(blank=True, default=list)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "categories",
                    models.ManyToManyField(blank=True, related_name="products", to="products.category"),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["is_active", "created_at"], name="product_active_created_idx"),
                    models.Index(fields=["on_sale", "featured"], name="product_sale_featured_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="PriceAlert",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("target_price", models.DecimalField(decimal_places=2, max_digits=12)),
                (
                    "channel",
                    models.CharField(
                        choices=[("email", "Email"), ("telegram", "Telegram")],
                        default="email",
                        max_length=16,
                    ),
                ),
                ("destination", models.CharField(max_length=255)),
                ("active", models.BooleanField(db_index=True, default=True)),
                ("triggered_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="price_alerts",
                        to="products.product",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="price_alerts",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["product", "active"], name="pricealert_product_active_idx"),
                ],
            },
        ),
    ]
