# pages/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from pages.views import PageViewSet

router = SimpleRouter()
router.register(r"", PageViewSet, basename="pages")

urlpatterns = [
    path("", include(router.urls)),
]
