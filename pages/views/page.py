# pages/views/page.py

"""
CMS PAGES + HOME CONTENT

Public:
- GET /api/pages/<slug>/              active pages only
- GET /api/pages/home-content/

Admin:
- GET       /api/pages/
- POST      /api/pages/
- PUT|PATCH /api/pages/<slug>/        upsert (201 on create, 200 on update)
- PUT       /api/pages/home-content/  only supplied keys change
"""

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from pages.models import Page
from pages.serializers import HomeContentSerializer, PageSerializer
from pages.services import PageNotFoundError, get_home_content, update_home_content
from permissions.roles import IsAdminOrAdminKey

logger = logging.getLogger(__name__)

MSG_CREATED = "صفحه با موفقیت ایجاد شد"
MSG_UPDATED = "صفحه با موفقیت به‌روزرسانی شد"


def _acting_user(request):
    return request.user if getattr(request.user, "is_authenticated", False) else None


class PageViewSet(viewsets.GenericViewSet):
    serializer_class = PageSerializer
    queryset = Page.objects.all()
    lookup_field = "slug"
    pagination_class = None

    def get_permissions(self):
        if self.action == "retrieve":
            return [AllowAny()]
        if self.action == "home_content" and self.request.method == "GET":
            return [AllowAny()]
        return [IsAdminOrAdminKey()]

    @extend_schema(responses={200: PageSerializer(many=True)})
    def list(self, request):
        return Response({"data": PageSerializer(self.get_queryset(), many=True).data}, status=status.HTTP_200_OK)

    @extend_schema(responses={200: PageSerializer})
    def retrieve(self, request, slug=None):
        page = Page.objects.filter(slug=(slug or "").lower(), is_active=True).first()
        if page is None:
            raise PageNotFoundError()
        return Response({"data": PageSerializer(page).data}, status=status.HTTP_200_OK)

    @extend_schema(request=PageSerializer, responses={201: PageSerializer})
    def create(self, request):
        serializer = PageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        page = serializer.save(updated_by=_acting_user(request))

        logger.info("Page created", extra={"slug": page.slug})
        return Response(
            {"message": MSG_CREATED, "data": PageSerializer(page).data},
            status=status.HTTP_201_CREATED,
        )

    def _upsert(self, request, slug, *, partial):
        slug = (slug or "").strip().lower()
        page = Page.objects.filter(slug=slug).first()

        data = request.data.copy()
        data["slug"] = slug

        if page is None:
            serializer = PageSerializer(data=data)
            serializer.is_valid(raise_exception=True)
            page = serializer.save(updated_by=_acting_user(request))
            logger.info("Page created by upsert", extra={"slug": slug})
            return Response(
                {"message": MSG_CREATED, "data": PageSerializer(page).data},
                status=status.HTTP_201_CREATED,
            )

        serializer = PageSerializer(page, data=data, partial=partial)
        serializer.is_valid(raise_exception=True)
        page = serializer.save(updated_by=_acting_user(request))
        return Response({"message": MSG_UPDATED, "data": PageSerializer(page).data}, status=status.HTTP_200_OK)

    @extend_schema(request=PageSerializer, responses={200: PageSerializer, 201: PageSerializer})
    def update(self, request, slug=None):
        return self._upsert(request, slug, partial=False)

    @extend_schema(request=PageSerializer, responses={200: PageSerializer, 201: PageSerializer})
    def partial_update(self, request, slug=None):
        return self._upsert(request, slug, partial=True)

    @extend_schema(
        methods=["GET"],
        responses={200: HomeContentSerializer},
    )
    @extend_schema(
        methods=["PUT"],
        request=HomeContentSerializer,
        responses={200: HomeContentSerializer, 400: OpenApiResponse(description="Validation error")},
    )
    @action(detail=False, methods=["get", "put"], url_path="home-content")
    def home_content(self, request):
        if request.method == "GET":
            content = get_home_content()
            return Response({"data": HomeContentSerializer(content).data}, status=status.HTTP_200_OK)

        serializer = HomeContentSerializer(get_home_content(), data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        content = update_home_content(serializer.validated_data)
        return Response({"data": HomeContentSerializer(content).data}, status=status.HTTP_200_OK)
