# products/urls.py

"""
PRODUCTS URLS

Purpose:
- Register catalog routes under /api/products/
    /products/categories/
    /products/products/            (+ discount-preview/)
    /products/price-alerts/
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from products.views import CategoryViewSet, PriceAlertViewSet, ProductViewSet

router = DefaultRouter()

router.register(r"categories", CategoryViewSet, basename="categories")
router.register(r"products", ProductViewSet, basename="products")
router.register(r"price-alerts", PriceAlertViewSet, basename="price-alerts")

urlpatterns = [
    path("", include(router.urls)),
]
