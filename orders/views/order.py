# orders/views/order.py

"""
======================================================
PATH: orders/views/order.py
======================================================
ORDERS API

Checkout (optional auth, throttled):
- POST  /api/orders/

Customer:
- GET   /api/orders/mine/?status=
- POST  /api/orders/lookup/                 {email, phone}  (public)
- GET   /api/orders/<id>/                   owner / admin / guest order
- POST  /api/orders/<id>/acknowledge/

Admin:
- GET   /api/orders/admin/                  {data, meta{total, page, limit}}
- PATCH /api/orders/<id>/status/
- POST  /api/orders/<id>/notify/
- PATCH /api/orders/<id>/delivery/
- PATCH /api/orders/<id>/items/<item_id>/warranty/
"""

import logging
import uuid

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from orders.filters import AdminOrderFilter
from orders.models import Order
from orders.serializers import (
    CheckoutSerializer,
    OrderDeliverySerializer,
    OrderItemSerializer,
    OrderLookupSerializer,
    OrderNotifySerializer,
    OrderSerializer,
    OrderStatusUpdateSerializer,
    WarrantySerializer,
)
from orders.services import OrderNotFoundError, place_order
from orders.services.lifecycle import (
    acknowledge_delivery,
    notify_customer,
    update_delivery,
    update_item_warranty,
    update_status,
)
from permissions.roles import IsAdminOrAdminKey, is_admin_user

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_LIMIT = 20
MAX_ADMIN_LIMIT = 100

ADMIN_ACTIONS = {"admin_list", "set_status", "notify", "delivery", "warranty"}


class PublicWriteThrottle(AnonRateThrottle):
    scope = "public_write"


def _positive_int(raw, default, maximum=None):
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    if value < 1:
        return default
    if maximum is not None:
        value = min(value, maximum)
    return value


class OrderViewSet(viewsets.GenericViewSet):
    serializer_class = OrderSerializer
    queryset = Order.objects.select_related("user").prefetch_related("items", "items__product")
    lookup_value_regex = "[0-9a-fA-F-]{32,36}"

    def get_permissions(self):
        if self.action in ADMIN_ACTIONS:
            return [IsAdminOrAdminKey()]
        if self.action in {"create", "lookup", "retrieve"}:
            return [AllowAny()]
        return [IsAuthenticated()]

    def get_throttles(self):
        if self.action == "create":
            return [PublicWriteThrottle()]
        return super().get_throttles()

    def _render(self, orders, *, many=False, include_credentials=True):
        return OrderSerializer(
            orders,
            many=many,
            context={"request": self.request, "include_credentials": include_credentials},
        ).data

    def get_object(self):
        try:
            pk = uuid.UUID(str(self.kwargs.get("pk")))
        except ValueError:
            raise OrderNotFoundError()

        order = self.get_queryset().filter(pk=pk).first()
        if order is None:
            raise OrderNotFoundError()
        return order

    # -------------------------------------------------
    # Checkout
    # -------------------------------------------------
    @extend_schema(request=CheckoutSerializer, responses={201: OrderSerializer})
    def create(self, request):
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        order = place_order(
            user=request.user,
            customer=data["customer_info"],
            items=data["items"],
            shipping_method_id=data.get("shipping_method_id"),
            coupon_code=data.get("coupon_code"),
            payment_method=data.get("payment_method"),
            shipping_preferences=data.get("shipping_preferences"),
            note=data.get("note") or "",
        )

        order = self.get_queryset().get(pk=order.pk)
        return Response(self._render(order), status=status.HTTP_201_CREATED)

    # -------------------------------------------------
    # Customer
    # -------------------------------------------------
    @extend_schema(
        parameters=[OpenApiParameter("status", str, description="Payment status filter")],
        responses={200: OpenApiResponse(description="{data: [order]}")},
    )
    @action(detail=False, methods=["get"], url_path="mine")
    def mine(self, request):
        qs = self.get_queryset().filter(user=request.user).order_by("-created_at")
        payment_status = (request.query_params.get("status") or "").strip()
        if payment_status:
            qs = qs.filter(payment_status=payment_status)
        return Response({"data": self._render(qs, many=True)}, status=status.HTTP_200_OK)

    @extend_schema(request=OrderLookupSerializer, responses={200: OpenApiResponse(description="{data: [order]}")})
    @action(detail=False, methods=["post"], url_path="lookup")
    def lookup(self, request):
        serializer = OrderLookupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        qs = (
            self.get_queryset()
            .filter(
                customer_email__iexact=data["email"].strip(),
                customer_phone=data["phone"].strip(),
            )
            .order_by("-created_at")
        )
        # guests hold no account, so credentials stay out of a lookup by contact details
        return Response(
            {"data": self._render(qs, many=True, include_credentials=False)},
            status=status.HTTP_200_OK,
        )

    @extend_schema(responses={200: OrderSerializer})
    def retrieve(self, request, pk=None):
        order = self.get_object()

        if order.user_id is not None:
            user = request.user
            is_owner = getattr(user, "is_authenticated", False) and user.pk == order.user_id
            if not (is_owner or is_admin_user(user)):
                raise OrderNotFoundError()

        return Response(self._render(order), status=status.HTTP_200_OK)

    @extend_schema(request=None, responses={200: OrderSerializer})
    @action(detail=True, methods=["post"], url_path="acknowledge")
    def acknowledge(self, request, pk=None):
        order = acknowledge_delivery(self.get_object(), user=request.user)
        return Response(self._render(order), status=status.HTTP_200_OK)

    # -------------------------------------------------
    # Admin
    # -------------------------------------------------
    @extend_schema(
        parameters=[
            OpenApiParameter("search", str),
            OpenApiParameter("payment_status", str),
            OpenApiParameter("fulfillment_status", str),
            OpenApiParameter("from_date", str, description="YYYY-MM-DD"),
            OpenApiParameter("to_date", str, description="YYYY-MM-DD"),
            OpenApiParameter("page", int),
            OpenApiParameter("limit", int),
        ],
        responses={200: OpenApiResponse(description="{data, meta{total, page, limit}}")},
    )
    @action(detail=False, methods=["get"], url_path="admin")
    def admin_list(self, request):
        filterset = AdminOrderFilter(
            request.query_params,
            queryset=self.get_queryset().order_by("-created_at"),
        )
        if not filterset.is_valid():
            return Response(filterset.errors, status=status.HTTP_400_BAD_REQUEST)

        qs = filterset.qs
        page = _positive_int(request.query_params.get("page"), 1)
        limit = _positive_int(request.query_params.get("limit"), DEFAULT_ADMIN_LIMIT, MAX_ADMIN_LIMIT)

        total = qs.count()
        start = (page - 1) * limit
        rows = qs[start : start + limit]

        return Response(
            {
                "data": self._render(rows, many=True),
                "meta": {"total": total, "page": page, "limit": limit},
            },
            status=status.HTTP_200_OK,
        )

    @extend_schema(request=OrderStatusUpdateSerializer, responses={200: OrderSerializer})
    @action(detail=True, methods=["patch"], url_path="status")
    def set_status(self, request, pk=None):
        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        order = update_status(
            self.get_object(),
            payment_status=data.get("payment_status"),
            fulfillment_status=data.get("fulfillment_status"),
            payment_reference=data.get("payment_reference"),
        )
        return Response(self._render(order), status=status.HTTP_200_OK)

    @extend_schema(
        request=OrderNotifySerializer,
        responses={200: OpenApiResponse(description="{order_id, order_number, to, subject, message}")},
    )
    @action(detail=True, methods=["post"], url_path="notify")
    def notify(self, request, pk=None):
        serializer = OrderNotifySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = notify_customer(
            self.get_object(),
            subject=data.get("subject"),
            message=data.get("message"),
        )
        return Response(result, status=status.HTTP_200_OK)

    @extend_schema(request=OrderDeliverySerializer, responses={200: OrderSerializer})
    @action(detail=True, methods=["patch"], url_path="delivery")
    def delivery(self, request, pk=None):
        serializer = OrderDeliverySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        user = request.user if getattr(request.user, "is_authenticated", False) else None
        order = update_delivery(
            self.get_object(),
            message=data.get("message"),
            credentials=data.get("credentials"),
            tracking_code=data.get("tracking_code"),
            delivered_at=data.get("delivered_at"),
            updated_by=user,
        )
        return Response(self._render(order), status=status.HTTP_200_OK)

    @extend_schema(request=WarrantySerializer, responses={200: OrderItemSerializer})
    @action(detail=True, methods=["patch"], url_path=r"items/(?P<item_id>[0-9a-fA-F-]{32,36})/warranty")
    def warranty(self, request, pk=None, item_id=None):
        serializer = WarrantySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        item = update_item_warranty(
            self.get_object(),
            item_id,
            status=data["status"],
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
            description=data.get("description") or "",
        )
        return Response(OrderItemSerializer(item).data, status=status.HTTP_200_OK)
