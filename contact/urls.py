# contact/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from contact.views import ContactMessageViewSet

router = SimpleRouter()
router.register(r"", ContactMessageViewSet, basename="contact")

urlpatterns = [
    path("", include(router.urls)),
]
