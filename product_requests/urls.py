# product_requests/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from product_requests.views import ProductRequestViewSet

router = SimpleRouter()
router.register(r"", ProductRequestViewSet, basename="product-requests")

urlpatterns = [
    path("", include(router.urls)),
]
