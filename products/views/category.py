# products/views/category.py

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import viewsets
from rest_framework.permissions import AllowAny

from permissions.roles import IsAdminOrAdminKey, has_valid_admin_key, is_admin_user
from products.models import Category
from products.serializers.category import CategorySerializer
from products.views.lookup import get_by_id_or_slug


class CategoryViewSet(viewsets.ModelViewSet):
    """
    Category API

    Policy:
    - Anyone can READ active categories (menus, home page tiles)
    - Admins (or the admin key) can CREATE/UPDATE/DELETE
    - Admins also see inactive categories
    """

    serializer_class = CategorySerializer
    pagination_class = None
    lookup_value_regex = "[^/]+"

    def _is_admin(self) -> bool:
        return is_admin_user(self.request.user) or has_valid_admin_key(self.request)

    def get_permissions(self):
        if self.action in {"list", "retrieve"}:
            return [AllowAny()]
        return [IsAdminOrAdminKey()]

    def get_queryset(self):
        qs = Category.objects.select_related("parent").order_by("order", "name")
        if not self._is_admin():
            qs = qs.filter(is_active=True)

        home = (self.request.query_params.get("home") or "").strip().lower()
        if self.action == "list" and home in {"1", "true", "yes"}:
            qs = qs.filter(show_on_home=True)
        return qs

    def get_object(self):
        obj = get_by_id_or_slug(self.get_queryset(), self.kwargs[self.lookup_field])
        self.check_object_permissions(self.request, obj)
        return obj

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="home",
                type=bool,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Only categories flagged for the home page.",
            ),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)
