import uuid

from django.db import migrations, models

import banners.models.banner


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Banner",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=200)),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("hero", "Hero"),
                            ("promotional", "Promotional"),
                            ("announcement", "Announcement"),
                            ("cta", "Call to action"),
                            ("testimonial", "Testimonial"),
                            ("custom", "Custom"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "layout",
                    models.CharField(
                        choices=[
                            ("centered", "Centered"),
                            ("split", "Split"),
                            ("overlay", "Overlay"),
                            ("card", "Card"),
                            ("full-width", "Full width"),
                            ("floating", "Floating"),
                        ],
                        max_length=20,
                    ),
                ),
                ("active", models.BooleanField(db_index=True, default=True)),
                ("priority", models.IntegerField(default=0)),
                ("display_on", models.JSONField(blank=True, default=banners.models.banner.default_display_on)),
                ("background", models.JSONField(default=dict)),
                ("elements", models.JSONField(blank=True, default=list)),
                ("container_style", models.JSONField(blank=True, default=dict)),
                ("entrance_animation", models.CharField(blank=True, default="", max_length=20)),
                ("exit_animation", models.CharField(blank=True, default="", max_length=20)),
                ("hover_effects", models.JSONField(blank=True, default=dict)),
                ("mobile_settings", models.JSONField(blank=True, default=dict)),
                ("display_rules", models.JSONField(blank=True, default=dict)),
                ("views", models.PositiveIntegerField(default=0)),
                ("clicks", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-priority", "-created_at"],
            },
        ),
    ]
