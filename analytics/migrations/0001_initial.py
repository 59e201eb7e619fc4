import uuid

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="AnalyticsEvent",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "type",
                    models.CharField(
                        choices=[("pageview", "Page view"), ("click", "Click"), ("event", "Custom event")],
                        max_length=16,
                    ),
                ),
                ("url", models.CharField(max_length=2000)),
                ("path", models.CharField(blank=True, db_index=True, default="", max_length=1000)),
                ("title", models.CharField(blank=True, default="", max_length=500)),
                ("referrer", models.CharField(blank=True, default="", max_length=2000)),
                ("element_type", models.CharField(blank=True, default="", max_length=64)),
                ("element_text", models.CharField(blank=True, default="", max_length=500)),
                ("element_id", models.CharField(blank=True, default="", max_length=255)),
                ("element_class", models.CharField(blank=True, default="", max_length=500)),
                ("event_name", models.CharField(blank=True, default="", max_length=120)),
                ("event_data", models.JSONField(blank=True, default=dict)),
                ("session_id", models.CharField(db_index=True, max_length=128)),
                ("is_authenticated", models.BooleanField(default=False)),
                ("user_agent", models.CharField(blank=True, default="", max_length=1000)),
                (
                    "device_type",
                    models.CharField(
                        choices=[
                            ("mobile", "Mobile"),
                            ("tablet", "Tablet"),
                            ("desktop", "Desktop"),
                            ("unknown", "Unknown"),
                        ],
                        default="unknown",
                        max_length=16,
                    ),
                ),
                ("browser", models.CharField(blank=True, default="", max_length=32)),
                ("os", models.CharField(blank=True, default="", max_length=32)),
                ("screen_width", models.PositiveIntegerField(blank=True, null=True)),
                ("screen_height", models.PositiveIntegerField(blank=True, null=True)),
                ("ip_hash", models.CharField(blank=True, default="", max_length=64)),
                ("load_time", models.PositiveIntegerField(blank=True, null=True)),
                ("timestamp", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="analytics_events",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-timestamp"],
                "indexes": [
                    models.Index(fields=["type", "timestamp"], name="analytics_type_ts_idx"),
                ],
            },
        ),
    ]
