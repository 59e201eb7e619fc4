# banners/views/banner.py

"""
BANNERS

Public:
- GET  /api/banners/page/<page>/      targeted banners (optional auth)
- POST /api/banners/<id>/view/        (tracking throttle)
- POST /api/banners/<id>/click/       (tracking throttle)

Admin:
- CRUD /api/banners/                  ?active=true
"""

import uuid

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from banners.models import Banner
from banners.serializers import BannerSerializer
from banners.services import BannerNotFoundError, banners_for_page, track_click, track_view
from permissions.roles import IsAdminOrAdminKey

PUBLIC_ACTIONS = {"for_page", "record_view", "record_click"}
TRACKING_ACTIONS = {"record_view", "record_click"}


class TrackingThrottle(AnonRateThrottle):
    scope = "tracking"


def _banner_pk(raw):
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        raise BannerNotFoundError()


class BannerViewSet(viewsets.ModelViewSet):
    serializer_class = BannerSerializer
    pagination_class = None

    def get_queryset(self):
        qs = Banner.objects.order_by("-priority", "-created_at")
        if self.action == "list" and self.request.query_params.get("active") == "true":
            qs = qs.filter(active=True)
        return qs

    def get_permissions(self):
        if self.action in PUBLIC_ACTIONS:
            return [AllowAny()]
        return [IsAdminOrAdminKey()]

    def get_throttles(self):
        if self.action in TRACKING_ACTIONS:
            return [TrackingThrottle()]
        return super().get_throttles()

    def get_object(self):
        banner = Banner.objects.filter(pk=_banner_pk(self.kwargs.get("pk"))).first()
        if banner is None:
            raise BannerNotFoundError()
        self.check_object_permissions(self.request, banner)
        return banner

    @extend_schema(
        parameters=[OpenApiParameter("page", str, OpenApiParameter.PATH)],
        responses={200: BannerSerializer(many=True)},
    )
    @action(detail=False, methods=["get"], url_path=r"page/(?P<page>[^/.]+)")
    def for_page(self, request, page=None):
        banners = banners_for_page(page, request.user)
        return Response(BannerSerializer(banners, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(request=None, responses={200: OpenApiResponse(description="{message}")})
    @action(detail=True, methods=["post"], url_path="view")
    def record_view(self, request, pk=None):
        track_view(_banner_pk(pk))
        return Response({"message": "View tracked"}, status=status.HTTP_200_OK)

    @extend_schema(request=None, responses={200: OpenApiResponse(description="{message}")})
    @action(detail=True, methods=["post"], url_path="click")
    def record_click(self, request, pk=None):
        track_click(_banner_pk(pk))
        return Response({"message": "Click tracked"}, status=status.HTTP_200_OK)
