# coupons/views/coupon.py

"""
COUPONS

Public (optional auth):
- POST /api/coupons/validate/   {code, cart_total, product_ids[]}
    200 {"valid": true,  "coupon": {...}}
    400 {"valid": false, "error": "<reason>"}

Admin:
- CRUD /api/coupons/
- POST /api/coupons/generate-code/
"""

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from coupons.models import Coupon
from coupons.serializers import CouponSerializer, CouponValidateSerializer
from coupons.services import InvalidCouponError, validate_coupon
from coupons.services.coupons import generate_unique_code
from permissions.roles import IsAdminOrAdminKey

logger = logging.getLogger(__name__)


class CouponViewSet(viewsets.ModelViewSet):
    serializer_class = CouponSerializer
    queryset = Coupon.objects.prefetch_related(
        "applicable_products",
        "applicable_categories",
        "exclude_products",
        "user_specific",
    ).order_by("-created_at")

    def get_permissions(self):
        if self.action == "validate":
            return [AllowAny()]
        return [IsAdminOrAdminKey()]

    @extend_schema(
        request=CouponValidateSerializer,
        responses={
            200: OpenApiResponse(description="{valid: true, coupon}"),
            400: OpenApiResponse(description="{valid: false, error}"),
        },
    )
    @action(detail=False, methods=["post"], url_path="validate")
    def validate(self, request):
        serializer = CouponValidateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            quote = validate_coupon(
                data["code"],
                user=request.user,
                cart_total=data["cart_total"],
                product_ids=data.get("product_ids") or [],
            )
        except InvalidCouponError as exc:
            return Response({"valid": False, "error": exc.message}, status=status.HTTP_400_BAD_REQUEST)

        return Response({"valid": True, "coupon": quote.as_dict()}, status=status.HTTP_200_OK)

    @extend_schema(request=None, responses={200: OpenApiResponse(description="{code}")})
    @action(detail=False, methods=["post"], url_path="generate-code")
    def generate_code(self, request):
        return Response({"code": generate_unique_code()}, status=status.HTTP_200_OK)

    def perform_create(self, serializer):
        coupon = serializer.save()
        logger.info("Coupon created", extra={"coupon_id": str(coupon.pk), "code": coupon.code})

    def perform_destroy(self, instance):
        logger.info("Coupon deleted", extra={"coupon_id": str(instance.pk), "code": instance.code})
        instance.delete()
