# products/views/product.py

"""
PRODUCT VIEWSET

Purpose:
- Public product browsing (AllowAny): list + detail by id or slug
- Admin product management (CRUD) + the discount designer preview

Key rules:
- Public endpoints return ONLY active products.
- Category product_count is recounted on every create/update/delete.
- A price drop on update fires matching price alerts.
"""

import logging

from django.db.models import Case, DecimalField, F, When
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from permissions.roles import IsAdminOrAdminKey, has_valid_admin_key, is_admin_user
from products.filters import ProductFilter
from products.models import Product
from products.serializers import DiscountPreviewSerializer, ProductSerializer
from products.services.catalog import recount_categories
from products.services.price_alerts import trigger_price_alerts
from products.services.pricing import discount_preview as design_discount
from products.services.pricing import effective_price
from products.views.lookup import get_by_id_or_slug

logger = logging.getLogger(__name__)

# "price" sorts by what a shopper pays for the base product (sale price while on sale)
SORT_FIELDS = {
    "createdAt": "created_at",
    "-createdAt": "-created_at",
    "price": "shelf_price",
    "-price": "-shelf_price",
}

SHELF_PRICE = Case(
    When(on_sale=True, sale_price__isnull=False, then=F("sale_price")),
    default=F("base_price"),
    output_field=DecimalField(max_digits=12, decimal_places=2),
)


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"


def _parse_limit(raw) -> int | None:
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


class ProductViewSet(viewsets.ModelViewSet):
    """
    Product endpoints.

    Public:
    - GET /api/products/products/?category=&on_sale=&featured=&search=&sort=&limit=
    - GET /api/products/products/<id-or-slug>/

    Admin:
    - CRUD
    - POST /api/products/products/discount-preview/
    """

    serializer_class = ProductSerializer
    filterset_class = ProductFilter
    pagination_class = None
    lookup_value_regex = "[^/]+"

    def _is_admin(self) -> bool:
        return is_admin_user(self.request.user) or has_valid_admin_key(self.request)

    def get_permissions(self):
        if self.action in {"list", "retrieve"}:
            return [AllowAny()]
        return [IsAdminOrAdminKey()]

    def get_throttles(self):
        if self.action in {"list", "retrieve"}:
            return [PublicCatalogThrottle()]
        return super().get_throttles()

    def get_queryset(self):
        qs = Product.objects.prefetch_related("categories")
        if not self._is_admin():
            qs = qs.filter(is_active=True)
        return qs

    def get_object(self):
        obj = get_by_id_or_slug(self.get_queryset(), self.kwargs[self.lookup_field])
        self.check_object_permissions(self.request, obj)
        return obj

    @extend_schema(
        parameters=[
            OpenApiParameter(name="category", type=str, required=False, description="Category slug"),
            OpenApiParameter(name="on_sale", type=bool, required=False),
            OpenApiParameter(name="featured", type=bool, required=False),
            OpenApiParameter(name="search", type=str, required=False),
            OpenApiParameter(
                name="sort",
                type=str,
                required=False,
                enum=list(SORT_FIELDS.keys()),
                description="Defaults to -createdAt. price uses the sale price while a product is on sale.",
            ),
            OpenApiParameter(name="limit", type=int, required=False),
        ],
        responses={200: OpenApiResponse(description="{count, results}")},
    )
    def list(self, request, *args, **kwargs):
        qs = self.filter_queryset(self.get_queryset())

        sort = (request.query_params.get("sort") or "-createdAt").strip()
        qs = qs.annotate(shelf_price=SHELF_PRICE).order_by(SORT_FIELDS.get(sort, "-created_at"))

        count = qs.count()
        limit = _parse_limit(request.query_params.get("limit"))
        if limit:
            qs = qs[:limit]

        serializer = self.get_serializer(qs, many=True)
        return Response({"count": count, "results": serializer.data}, status=status.HTTP_200_OK)

    def perform_create(self, serializer):
        product = serializer.save()
        recount_categories(product.categories.values_list("id", flat=True))
        logger.info("Product created", extra={"product_id": str(product.pk)})

    def perform_update(self, serializer):
        instance = serializer.instance
        old_price = effective_price(instance)
        old_category_ids = set(instance.categories.values_list("id", flat=True))

        product = serializer.save()

        new_category_ids = set(product.categories.values_list("id", flat=True))
        recount_categories(old_category_ids | new_category_ids)

        new_price = effective_price(product)
        if product.is_active and new_price < old_price:
            trigger_price_alerts(product)

    def perform_destroy(self, instance):
        category_ids = set(instance.categories.values_list("id", flat=True))
        product_id = str(instance.pk)
        instance.delete()
        recount_categories(category_ids)
        logger.info("Product deleted", extra={"product_id": product_id})

    @extend_schema(
        request=DiscountPreviewSerializer,
        responses={200: OpenApiResponse(description="{sale_price, percent, savings}")},
        description="Discount designer: percent -> sale price, or sale price -> percent.",
    )
    @action(detail=False, methods=["post"], url_path="discount-preview")
    def discount_preview(self, request):
        serializer = DiscountPreviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        preview = design_discount(
            base_price=data["base_price"],
            percent=data.get("percent"),
            sale_price=data.get("sale_price"),
        )
        return Response(
            {
                "sale_price": str(preview["sale_price"]) if preview["sale_price"] is not None else None,
                "percent": preview["percent"],
                "savings": str(preview["savings"]),
            },
            status=status.HTTP_200_OK,
        )
