"""
ADMIN USER MANAGEMENT

- GET    /api/auth/users/?search=<email or name>
- PATCH  /api/auth/users/<id>/   {"role": "user" | "customer" | "admin"}
- DELETE /api/auth/users/<id>/
"""

from __future__ import annotations

import logging

from django.db.models import Q
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.response import Response

from backend.exceptions import ApiError
from permissions.roles import IsAdminOrAdminKey, normalize_role
from users.models import User
from users.serializers import UserRoleUpdateSerializer, UserSerializer

logger = logging.getLogger(__name__)

INVALID_ROLE_MESSAGE = "نقش معتبر نیست. باید user یا admin باشد"


class AdminUserViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = UserSerializer
    permission_classes = [IsAdminOrAdminKey]

    def get_queryset(self):
        qs = User.objects.all().order_by("-created_at")
        search = (self.request.query_params.get("search") or "").strip()
        if search:
            qs = qs.filter(
                Q(email__icontains=search)
                | Q(first_name__icontains=search)
                | Q(last_name__icontains=search)
            )
        return qs

    @extend_schema(
        parameters=[OpenApiParameter("search", str, OpenApiParameter.QUERY, required=False)],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=UserRoleUpdateSerializer, responses={200: UserSerializer})
    def partial_update(self, request, *args, **kwargs):
        user = self.get_object()

        serializer = UserRoleUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        role = normalize_role(serializer.validated_data["role"])
        if role is None:
            raise ApiError(INVALID_ROLE_MESSAGE, code="INVALID_ROLE")

        user.role = role
        user.save(update_fields=["role", "updated_at"])

        logger.info("User role updated", extra={"user_id": str(user.id), "role": role})

        return Response(
            {
                "message": "اطلاعات کاربر به‌روزرسانی شد",
                "user": UserSerializer(user).data,
            },
            status=status.HTTP_200_OK,
        )

    def destroy(self, request, *args, **kwargs):
        user = self.get_object()
        if request.user.is_authenticated and request.user.pk == user.pk:
            raise ApiError("Admins cannot delete their own account", code="SELF_DELETE")

        user.delete()
        logger.info("User deleted", extra={"user_id": str(user.pk)})
        return Response(status=status.HTTP_204_NO_CONTENT)
