# contact/views/contact.py

"""
CONTACT

Public:
- POST   /api/contact/                 (public_write throttle)

Admin:
- GET    /api/contact/
- PATCH  /api/contact/<id>/read/
- DELETE /api/contact/<id>/
"""

import uuid

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from contact.models import ContactMessage
from contact.serializers import ContactFormSerializer, ContactMessageSerializer
from contact.services import ContactMessageNotFoundError, ContactValidationError, submit_contact_message
from permissions.roles import IsAdminOrAdminKey

MSG_SENT = "پیام شما با موفقیت ثبت و ارسال شد"
MSG_DELETED = "پیام حذف شد"


class PublicWriteThrottle(AnonRateThrottle):
    scope = "public_write"


class ContactMessageViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    serializer_class = ContactMessageSerializer
    queryset = ContactMessage.objects.all()
    pagination_class = None

    def get_permissions(self):
        if self.action == "create":
            return [AllowAny()]
        return [IsAdminOrAdminKey()]

    def get_throttles(self):
        if self.action == "create":
            return [PublicWriteThrottle()]
        return super().get_throttles()

    def get_object(self):
        try:
            pk = uuid.UUID(str(self.kwargs.get("pk")))
        except ValueError:
            raise ContactMessageNotFoundError()
        contact = ContactMessage.objects.filter(pk=pk).first()
        if contact is None:
            raise ContactMessageNotFoundError()
        return contact

    @extend_schema(request=ContactFormSerializer, responses={201: OpenApiResponse(description="{success, message, data}")})
    def create(self, request):
        serializer = ContactFormSerializer(data=request.data)
        if not serializer.is_valid():
            raise ContactValidationError()

        contact = submit_contact_message(**serializer.validated_data)
        return Response(
            {
                "success": True,
                "message": MSG_SENT,
                "data": ContactMessageSerializer(contact).data,
            },
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(request=None, responses={200: ContactMessageSerializer})
    @action(detail=True, methods=["patch"], url_path="read")
    def mark_read(self, request, pk=None):
        contact = self.get_object()
        if not contact.is_read:
            contact.is_read = True
            contact.save(update_fields=["is_read", "updated_at"])
        return Response(ContactMessageSerializer(contact).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        self.get_object().delete()
        return Response({"success": True, "message": MSG_DELETED}, status=status.HTTP_200_OK)
