# reviews/views/review.py

"""
REVIEWS

Public:
- GET    /api/reviews/product/<product_id>/?limit=
- GET    /api/reviews/stats/?product=

Authenticated:
- POST   /api/reviews/

Admin:
- GET    /api/reviews/?product=&status=&user=&page=&limit=
- PATCH  /api/reviews/<id>/status/
- DELETE /api/reviews/<id>/
"""

import math
import uuid

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from permissions.roles import IsAdminOrAdminKey
from products.services.exceptions import ProductNotFoundError
from reviews.models import Review
from reviews.serializers import ReviewCreateSerializer, ReviewModerationSerializer, ReviewSerializer
from reviews.services import ReviewNotFoundError, create_review, delete_review, moderate, review_stats

MSG_CREATED = "نظر شما با موفقیت ثبت شد و پس از تأیید ادمین نمایش داده می‌شود"
MSG_DELETED = "نظر حذف شد"

DEFAULT_PUBLIC_LIMIT = 10
DEFAULT_ADMIN_LIMIT = 20
MAX_LIMIT = 100


def _positive_int(raw, default, maximum=MAX_LIMIT):
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    if value < 1:
        return default
    return min(value, maximum)


def _uuid_or_none(raw):
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        return None


class ReviewViewSet(viewsets.GenericViewSet):
    serializer_class = ReviewSerializer
    queryset = Review.objects.select_related("user", "product")
    pagination_class = None

    def get_permissions(self):
        if self.action in {"for_product", "stats"}:
            return [AllowAny()]
        if self.action == "create":
            return [IsAuthenticated()]
        return [IsAdminOrAdminKey()]

    def get_object(self):
        pk = _uuid_or_none(self.kwargs.get("pk"))
        review = self.get_queryset().filter(pk=pk).first() if pk else None
        if review is None:
            raise ReviewNotFoundError()
        return review

    @extend_schema(request=ReviewCreateSerializer, responses={201: ReviewSerializer})
    def create(self, request):
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = create_review(user=request.user, **serializer.validated_data)
        return Response(
            {"message": MSG_CREATED, "data": ReviewSerializer(review).data},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        parameters=[
            OpenApiParameter("product", str),
            OpenApiParameter("status", str),
            OpenApiParameter("user", str),
            OpenApiParameter("page", int),
            OpenApiParameter("limit", int),
        ],
        responses={200: OpenApiResponse(description="{reviews, total, page, limit, total_pages}")},
    )
    def list(self, request):
        qs = self.get_queryset().order_by("-created_at")
        params = request.query_params

        if params.get("product"):
            product_id = _uuid_or_none(params.get("product"))
            qs = qs.filter(product_id=product_id) if product_id else qs.none()
        if params.get("status"):
            qs = qs.filter(status=params["status"])
        if params.get("user"):
            user_id = _uuid_or_none(params.get("user"))
            qs = qs.filter(user_id=user_id) if user_id else qs.none()

        page = _positive_int(params.get("page"), 1, maximum=10**6)
        limit = _positive_int(params.get("limit"), DEFAULT_ADMIN_LIMIT)
        total = qs.count()
        start = (page - 1) * limit

        return Response(
            {
                "reviews": ReviewSerializer(qs[start : start + limit], many=True).data,
                "total": total,
                "page": page,
                "limit": limit,
                "total_pages": math.ceil(total / limit) if total else 0,
            },
            status=status.HTTP_200_OK,
        )

    @extend_schema(
        parameters=[OpenApiParameter("limit", int)],
        responses={200: ReviewSerializer(many=True)},
    )
    @action(detail=False, methods=["get"], url_path=r"product/(?P<product_id>[0-9a-fA-F-]{32,36})")
    def for_product(self, request, product_id=None):
        limit = _positive_int(request.query_params.get("limit"), DEFAULT_PUBLIC_LIMIT)
        qs = (
            self.get_queryset()
            .filter(product_id=_uuid_or_none(product_id), status=Review.STATUS_APPROVED)
            .order_by("-created_at")[:limit]
        )
        return Response({"data": ReviewSerializer(qs, many=True).data}, status=status.HTTP_200_OK)

    @extend_schema(
        parameters=[OpenApiParameter("product", str)],
        responses={200: OpenApiResponse(description="{total, pending, approved, rejected, average_rating}")},
    )
    @action(detail=False, methods=["get"], url_path="stats")
    def stats(self, request):
        raw = request.query_params.get("product")
        product_id = _uuid_or_none(raw) if raw else None
        if raw and product_id is None:
            raise ProductNotFoundError()
        return Response(review_stats(product_id=product_id), status=status.HTTP_200_OK)

    @extend_schema(request=ReviewModerationSerializer, responses={200: ReviewSerializer})
    @action(detail=True, methods=["patch"], url_path="status")
    def set_status(self, request, pk=None):
        serializer = ReviewModerationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        review = moderate(
            self.get_object(),
            status=data["status"],
            admin_note=data.get("admin_note") or "",
            reviewer=request.user if getattr(request.user, "is_authenticated", False) else None,
        )
        verb = "تأیید" if review.status == Review.STATUS_APPROVED else "رد"
        return Response(
            {"message": f"نظر {verb} شد", "data": ReviewSerializer(review).data},
            status=status.HTTP_200_OK,
        )

    def destroy(self, request, pk=None):
        delete_review(self.get_object())
        return Response({"message": MSG_DELETED}, status=status.HTTP_200_OK)
