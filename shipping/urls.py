# shipping/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from shipping.views import ShippingMethodViewSet

router = SimpleRouter()
router.register(r"", ShippingMethodViewSet, basename="shipping-methods")

urlpatterns = [
    path("", include(router.urls)),
]
