# analytics/views/analytics.py

"""
ANALYTICS

Public (tracking throttle, fire-and-forget):
- POST /api/analytics/pageview/
- POST /api/analytics/click/
- POST /api/analytics/event/

Admin:
- GET  /api/analytics/overview/?days=7
- GET  /api/analytics/pageviews/
- GET  /api/analytics/clicks/
- GET  /api/analytics/popular-pages/?limit=10
- GET  /api/analytics/sales/?days=30
"""

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from analytics.models import AnalyticsEvent
from analytics.serializers import (
    AnalyticsEventSerializer,
    ClickSerializer,
    CustomEventSerializer,
    PageViewSerializer,
)
from analytics.services import popular_pages, record_event, sales_dashboard, traffic_overview
from permissions.roles import IsAdminOrAdminKey

MAX_DAYS = 365
MAX_LIMIT = 100

TRACKING_ACTIONS = {"pageview", "click", "custom_event"}


class TrackingThrottle(AnonRateThrottle):
    scope = "tracking"


def _bounded_int(raw, default, maximum):
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    if value < 1:
        return default
    return min(value, maximum)


class AnalyticsViewSet(viewsets.GenericViewSet):
    serializer_class = AnalyticsEventSerializer
    queryset = AnalyticsEvent.objects.all()

    def get_permissions(self):
        if self.action in TRACKING_ACTIONS:
            return [AllowAny()]
        return [IsAdminOrAdminKey()]

    def get_throttles(self):
        if self.action in TRACKING_ACTIONS:
            return [TrackingThrottle()]
        return super().get_throttles()

    def _track(self, request, serializer_class, event_type):
        serializer = serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = record_event(request, event_type=event_type, data=serializer.validated_data)
        return Response({"success": True, "id": str(event.id)}, status=status.HTTP_201_CREATED)

    def _events(self, request, event_type):
        qs = self.get_queryset().filter(type=event_type)
        if request.query_params.get("path"):
            qs = qs.filter(path=request.query_params["path"])
        page = self.paginate_queryset(qs)
        return self.get_paginated_response(self.get_serializer(page, many=True).data)

    # ---------------- tracking ----------------

    @extend_schema(request=PageViewSerializer, responses={201: OpenApiResponse(description="{success, id}")})
    @action(detail=False, methods=["post"], url_path="pageview")
    def pageview(self, request):
        return self._track(request, PageViewSerializer, AnalyticsEvent.TYPE_PAGEVIEW)

    @extend_schema(request=ClickSerializer, responses={201: OpenApiResponse(description="{success, id}")})
    @action(detail=False, methods=["post"], url_path="click")
    def click(self, request):
        return self._track(request, ClickSerializer, AnalyticsEvent.TYPE_CLICK)

    @extend_schema(request=CustomEventSerializer, responses={201: OpenApiResponse(description="{success, id}")})
    @action(detail=False, methods=["post"], url_path="event")
    def custom_event(self, request):
        return self._track(request, CustomEventSerializer, AnalyticsEvent.TYPE_EVENT)

    # ---------------- admin ----------------

    @extend_schema(parameters=[OpenApiParameter("days", int)])
    @action(detail=False, methods=["get"], url_path="overview")
    def overview(self, request):
        days = _bounded_int(request.query_params.get("days"), 7, MAX_DAYS)
        return Response(traffic_overview(days=days), status=status.HTTP_200_OK)

    @extend_schema(parameters=[OpenApiParameter("path", str)], responses={200: AnalyticsEventSerializer(many=True)})
    @action(detail=False, methods=["get"], url_path="pageviews")
    def pageviews(self, request):
        return self._events(request, AnalyticsEvent.TYPE_PAGEVIEW)

    @extend_schema(parameters=[OpenApiParameter("path", str)], responses={200: AnalyticsEventSerializer(many=True)})
    @action(detail=False, methods=["get"], url_path="clicks")
    def clicks(self, request):
        return self._events(request, AnalyticsEvent.TYPE_CLICK)

    @extend_schema(parameters=[OpenApiParameter("limit", int), OpenApiParameter("days", int)])
    @action(detail=False, methods=["get"], url_path="popular-pages")
    def popular(self, request):
        limit = _bounded_int(request.query_params.get("limit"), 10, MAX_LIMIT)
        days = _bounded_int(request.query_params.get("days"), None, MAX_DAYS)
        return Response({"data": popular_pages(limit=limit, days=days)}, status=status.HTTP_200_OK)

    @extend_schema(parameters=[OpenApiParameter("days", int)])
    @action(detail=False, methods=["get"], url_path="sales")
    def sales(self, request):
        days = _bounded_int(request.query_params.get("days"), 30, MAX_DAYS)
        return Response(sales_dashboard(days=days), status=status.HTTP_200_OK)
