# shipping/views/shipping_method.py

"""
SHIPPING METHODS

Envelope (storefront contract):
    {"success": true, "data": ..., "message": "..."}

Public:
- GET /api/shipping-methods/?active=true
- GET /api/shipping-methods/<id>/

Admin:
- POST / PATCH / PUT / DELETE
- PUT /api/shipping-methods/reorder/   {"methods": [{"id", "order"}]}
"""

import logging
import uuid

from django.db import transaction
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from backend.exceptions import NotFoundError
from permissions.roles import IsAdminOrAdminKey
from shipping.models import ShippingMethod
from shipping.serializers import ReorderSerializer, ShippingMethodSerializer

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Shipping method not found"


def _envelope(data=None, message=None, http_status=status.HTTP_200_OK):
    body = {"success": True, "data": data}
    if message:
        body["message"] = message
    return Response(body, status=http_status)


class ShippingMethodViewSet(viewsets.ModelViewSet):
    serializer_class = ShippingMethodSerializer
    pagination_class = None

    def get_permissions(self):
        if self.action in {"list", "retrieve"}:
            return [AllowAny()]
        return [IsAdminOrAdminKey()]

    def get_queryset(self):
        qs = ShippingMethod.objects.all().order_by("order", "created_at")
        active = (self.request.query_params.get("active") or "").strip().lower()
        if self.action == "list" and active in {"1", "true", "yes"}:
            qs = qs.filter(is_active=True)
        return qs

    def get_object(self):
        try:
            pk = uuid.UUID(str(self.kwargs.get("pk")))
        except ValueError:
            raise NotFoundError(NOT_FOUND_MESSAGE, code="SHIPPING_METHOD_NOT_FOUND")
        obj = ShippingMethod.objects.filter(pk=pk).first()
        if obj is None:
            raise NotFoundError(NOT_FOUND_MESSAGE, code="SHIPPING_METHOD_NOT_FOUND")
        self.check_object_permissions(self.request, obj)
        return obj

    @extend_schema(
        parameters=[
            OpenApiParameter(name="active", type=bool, required=False, description="Only active methods"),
        ],
    )
    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return _envelope(serializer.data)

    def retrieve(self, request, *args, **kwargs):
        return _envelope(self.get_serializer(self.get_object()).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        method = serializer.save()
        logger.info("Shipping method created", extra={"shipping_method_id": str(method.pk)})
        return _envelope(
            serializer.data,
            "Shipping method created successfully",
            http_status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return _envelope(serializer.data, "Shipping method updated successfully")

    def destroy(self, request, *args, **kwargs):
        method = self.get_object()
        method_id = str(method.pk)
        method.delete()
        logger.info("Shipping method deleted", extra={"shipping_method_id": method_id})
        return _envelope(None, "Shipping method deleted successfully")

    @extend_schema(
        request=ReorderSerializer,
        responses={200: OpenApiResponse(description="Reordered list")},
    )
    @action(detail=False, methods=["put"], url_path="reorder")
    def reorder(self, request):
        serializer = ReorderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        with transaction.atomic():
            for entry in serializer.validated_data["methods"]:
                ShippingMethod.objects.filter(pk=entry["id"]).update(order=entry["order"])

        data = ShippingMethodSerializer(
            ShippingMethod.objects.all().order_by("order", "created_at"),
            many=True,
        ).data
        return _envelope(data, "Shipping methods reordered successfully")
