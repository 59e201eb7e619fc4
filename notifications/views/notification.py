# notifications/views/notification.py

"""
NOTIFICATIONS (OWN INBOX)

- GET    /api/notifications/
- GET    /api/notifications/unread-count/
- PATCH  /api/notifications/<id>/read/
- POST   /api/notifications/read-all/
- DELETE /api/notifications/<id>/
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from notifications.models import Notification
from notifications.serializers import NotificationSerializer


class NotificationViewSet(
    mixins.ListModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = NotificationSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return Notification.objects.select_related("order").filter(user=self.request.user)

    @extend_schema(responses={200: OpenApiResponse(description="{count}")})
    @action(detail=False, methods=["get"], url_path="unread-count")
    def unread_count(self, request):
        count = self.get_queryset().filter(read=False).count()
        return Response({"count": count}, status=status.HTTP_200_OK)

    @extend_schema(request=None, responses={200: NotificationSerializer})
    @action(detail=True, methods=["patch"], url_path="read")
    def mark_read(self, request, pk=None):
        notification = self.get_object()
        if not notification.read:
            notification.read = True
            notification.save(update_fields=["read", "updated_at"])
        return Response(self.get_serializer(notification).data, status=status.HTTP_200_OK)

    @extend_schema(request=None, responses={200: OpenApiResponse(description="{updated}")})
    @action(detail=False, methods=["post"], url_path="read-all")
    def read_all(self, request):
        updated = self.get_queryset().filter(read=False).update(read=True)
        return Response({"updated": updated}, status=status.HTTP_200_OK)
