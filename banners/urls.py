# banners/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from banners.views import BannerViewSet

router = SimpleRouter()
router.register(r"", BannerViewSet, basename="banners")

urlpatterns = [
    path("", include(router.urls)),
]
