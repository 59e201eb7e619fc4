# product_requests/apps.py

from django.apps import AppConfig


class ProductRequestsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "product_requests"
    verbose_name = "Product Requests"
