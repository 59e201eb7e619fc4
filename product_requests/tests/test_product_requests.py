# product_requests/tests/test_product_requests.py

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from notifications.models import Notification
from permissions.roles import ROLE_ADMIN
from product_requests.models import ProductRequest

User = get_user_model()

URL = "/api/product-requests/"


class ProductRequestTests(TestCase):
    """
    GUARANTEES:
    - Signed-in users create and list their own requests
    - Owners may delete only while pending; admins always
    - Admin status changes stamp responded_at and notify the requester
    """

    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="u@example.com", password="pass12345")
        self.other = User.objects.create_user(email="o@example.com", password="pass12345")
        self.admin = User.objects.create_user(email="admin@example.com", password="pass12345", role=ROLE_ADMIN)

    def _make(self, user=None, **fields):
        return ProductRequest.objects.create(
            user=user or self.user,
            product_name=fields.pop("product_name", "Dutch oven"),
            category="kitchen",
            brand="Le Creuset",
            **fields,
        )

    def test_create_requires_auth(self):
        res = self.client.post(URL, {}, format="json")
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_create_request(self):
        self.client.force_authenticate(user=self.user)
        res = self.client.post(
            URL,
            {"product_name": "Linen duvet", "category": "bedding", "brand": "Zara Home"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["message"], "درخواست شما با موفقیت ثبت شد")
        self.assertEqual(res.data["data"]["status"], "pending")

    def test_create_missing_fields(self):
        self.client.force_authenticate(user=self.user)
        res = self.client.post(URL, {"product_name": "Linen duvet"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["message"], "لطفاً تمام فیلدها را پر کنید")

    def test_list_only_own(self):
        self._make()
        self._make(user=self.other)
        self.client.force_authenticate(user=self.user)

        res = self.client.get(URL)
        self.assertEqual(len(res.data["data"]), 1)

    def test_owner_deletes_pending(self):
        obj = self._make()
        self.client.force_authenticate(user=self.user)
        res = self.client.delete(f"{URL}{obj.id}/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertFalse(ProductRequest.objects.exists())

    def test_owner_cannot_delete_answered_request(self):
        obj = self._make(status=ProductRequest.STATUS_APPROVED)
        self.client.force_authenticate(user=self.user)
        res = self.client.delete(f"{URL}{obj.id}/")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(res.data["error"]["message"], "شما مجاز به حذف این درخواست نیستید")

    def test_other_user_cannot_delete(self):
        obj = self._make()
        self.client.force_authenticate(user=self.other)
        res = self.client.delete(f"{URL}{obj.id}/")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_deletes_any(self):
        obj = self._make(status=ProductRequest.STATUS_REJECTED)
        self.client.force_authenticate(user=self.admin)
        res = self.client.delete(f"{URL}{obj.id}/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)

    def test_delete_missing(self):
        self.client.force_authenticate(user=self.user)
        res = self.client.delete(f"{URL}00000000-0000-0000-0000-000000000000/")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["message"], "درخواست یافت نشد")

    def test_admin_all_with_statistics(self):
        self._make()
        self._make(status=ProductRequest.STATUS_APPROVED)
        self._make(status=ProductRequest.STATUS_COMPLETED)
        self.client.force_authenticate(user=self.admin)

        res = self.client.get(f"{URL}all/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data["requests"]), 3)
        self.assertEqual(
            res.data["statistics"],
            {"total": 3, "pending": 1, "approved": 1, "rejected": 0, "completed": 1},
        )

        res = self.client.get(f"{URL}all/?status=pending")
        self.assertEqual(len(res.data["requests"]), 1)

    def test_customer_cannot_view_all(self):
        self.client.force_authenticate(user=self.user)
        res = self.client.get(f"{URL}all/")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_status_update_notifies(self):
        obj = self._make()
        self.client.force_authenticate(user=self.admin)

        res = self.client.patch(f"{URL}{obj.id}/", {"status": "approved", "admin_note": "Coming soon"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        obj.refresh_from_db()
        self.assertEqual(obj.status, ProductRequest.STATUS_APPROVED)
        self.assertEqual(obj.admin_note, "Coming soon")
        self.assertIsNotNone(obj.responded_at)

        notification = Notification.objects.get(user=self.user)
        self.assertEqual(notification.type, Notification.TYPE_SYSTEM)
        self.assertEqual(notification.message, "Coming soon")

    def test_status_required_and_validated(self):
        obj = self._make()
        self.client.force_authenticate(user=self.admin)

        res = self.client.patch(f"{URL}{obj.id}/", {}, format="json")
        self.assertEqual(res.data["error"]["message"], "وضعیت الزامی است")

        res = self.client.patch(f"{URL}{obj.id}/", {"status": "shipped"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["message"], "وضعیت نامعتبر است")
