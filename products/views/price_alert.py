# products/views/price_alert.py

from rest_framework import mixins, status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from products.models import PriceAlert
from products.serializers import PriceAlertSerializer
from products.services.price_alerts import create_price_alert


class PriceAlertViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    A shopper's own price alerts.

    - list shows active alerts only
    - another user's alert is a 404 (queryset is owner-scoped)
    """

    serializer_class = PriceAlertSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        qs = PriceAlert.objects.select_related("product").filter(user=self.request.user)
        if self.action == "list":
            qs = qs.filter(active=True)
        return qs

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        alert = create_price_alert(
            user=request.user,
            product=data["product"],
            target_price=data["target_price"],
            channel=data.get("channel"),
            destination=data.get("destination") or request.user.email,
        )
        return Response(self.get_serializer(alert).data, status=status.HTTP_201_CREATED)
