# product_requests/views/product_request.py

"""
PRODUCT REQUESTS

User (auth):
- POST   /api/product-requests/          (public_write throttle)
- GET    /api/product-requests/          own requests
- DELETE /api/product-requests/<id>/     owner while pending, or admin

Admin:
- GET    /api/product-requests/all/?status=
- PATCH  /api/product-requests/<id>/     {status, admin_note}
"""

import uuid

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import UserRateThrottle

from permissions.roles import IsAdminOrAdminKey
from product_requests.models import ProductRequest
from product_requests.serializers import ProductRequestCreateSerializer, ProductRequestSerializer
from product_requests.services import (
    ProductRequestNotFoundError,
    ProductRequestValidationError,
    create_request,
    delete_request,
    respond,
    statistics,
)

MSG_FILL_ALL = "لطفاً تمام فیلدها را پر کنید"
MSG_CREATED = "درخواست شما با موفقیت ثبت شد"
MSG_UPDATED = "وضعیت درخواست با موفقیت به‌روزرسانی شد"
MSG_DELETED = "درخواست با موفقیت حذف شد"
MSG_STATUS_REQUIRED = "وضعیت الزامی است"
MSG_STATUS_INVALID = "وضعیت نامعتبر است"

VALID_STATUSES = {value for value, _ in ProductRequest.STATUS_CHOICES}


class PublicWriteUserThrottle(UserRateThrottle):
    scope = "public_write"


class ProductRequestViewSet(viewsets.GenericViewSet):
    serializer_class = ProductRequestSerializer
    queryset = ProductRequest.objects.select_related("user")
    pagination_class = None

    def get_permissions(self):
        if self.action in {"all_requests", "partial_update"}:
            return [IsAdminOrAdminKey()]
        return [IsAuthenticated()]

    def get_throttles(self):
        if self.action == "create":
            return [PublicWriteUserThrottle()]
        return super().get_throttles()

    def get_object(self):
        try:
            pk = uuid.UUID(str(self.kwargs.get("pk")))
        except ValueError:
            raise ProductRequestNotFoundError()
        obj = self.get_queryset().filter(pk=pk).first()
        if obj is None:
            raise ProductRequestNotFoundError()
        return obj

    @extend_schema(responses={200: ProductRequestSerializer(many=True)})
    def list(self, request):
        qs = self.get_queryset().filter(user=request.user)
        return Response({"data": ProductRequestSerializer(qs, many=True).data}, status=status.HTTP_200_OK)

    @extend_schema(request=ProductRequestCreateSerializer, responses={201: ProductRequestSerializer})
    def create(self, request):
        serializer = ProductRequestCreateSerializer(data=request.data)
        if not serializer.is_valid():
            raise ProductRequestValidationError(MSG_FILL_ALL)

        obj = create_request(user=request.user, **serializer.validated_data)
        return Response(
            {"message": MSG_CREATED, "data": ProductRequestSerializer(obj).data},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        parameters=[OpenApiParameter("status", str)],
        responses={200: OpenApiResponse(description="{requests, statistics}")},
    )
    @action(detail=False, methods=["get"], url_path="all")
    def all_requests(self, request):
        qs = self.get_queryset()
        wanted = (request.query_params.get("status") or "").strip()
        if wanted and wanted != "all":
            qs = qs.filter(status=wanted)

        return Response(
            {
                "requests": ProductRequestSerializer(qs, many=True).data,
                "statistics": statistics(),
            },
            status=status.HTTP_200_OK,
        )

    @extend_schema(responses={200: ProductRequestSerializer})
    def partial_update(self, request, pk=None):
        new_status = str(request.data.get("status") or "").strip()
        if not new_status:
            raise ProductRequestValidationError(MSG_STATUS_REQUIRED)
        if new_status not in VALID_STATUSES:
            raise ProductRequestValidationError(MSG_STATUS_INVALID)

        obj = respond(
            self.get_object(),
            status=new_status,
            admin_note=str(request.data.get("admin_note") or "").strip() or None,
        )
        return Response(
            {"message": MSG_UPDATED, "data": ProductRequestSerializer(obj).data},
            status=status.HTTP_200_OK,
        )

    def destroy(self, request, pk=None):
        delete_request(self.get_object(), user=request.user)
        return Response({"message": MSG_DELETED}, status=status.HTTP_200_OK)
