# coupons/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from coupons.views import CouponViewSet

router = SimpleRouter()
router.register(r"", CouponViewSet, basename="coupons")

urlpatterns = [
    path("", include(router.urls)),
]
