# reviews/tests/test_reviews.py

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from permissions.roles import ROLE_ADMIN
from products.models import Product
from reviews.models import Review

User = get_user_model()

COMMENT = "A sturdy and beautiful piece for the living room."


class ReviewSubmissionTests(TestCase):
    """
    GUARANTEES:
    - Only authenticated users may review
    - One review per (user, product); new reviews start pending
    - Rating and comment length are validated
    """

    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="shopper@example.com", password="pass12345")
        self.product = Product.objects.create(title="Oak Table", base_price=Decimal("9000000"))

    def _post(self, **overrides):
        payload = {"product_id": str(self.product.id), "rating": 4, "comment": COMMENT}
        payload.update(overrides)
        return self.client.post("/api/reviews/", payload, format="json")

    def test_requires_auth(self):
        self.assertEqual(self._post().status_code, status.HTTP_401_UNAUTHORIZED)

    def test_create_is_pending(self):
        self.client.force_authenticate(user=self.user)
        res = self._post()

        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertIn("پس از تأیید ادمین", res.data["message"])
        self.assertEqual(res.data["data"]["status"], Review.STATUS_PENDING)

        self.product.refresh_from_db()
        self.assertEqual(self.product.rating, Decimal("0.0"))

    def test_duplicate_rejected(self):
        self.client.force_authenticate(user=self.user)
        self._post()
        res = self._post(rating=2)

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["message"], "شما قبلاً برای این محصول نظر ثبت کرده‌اید")
        self.assertEqual(Review.objects.count(), 1)

    def test_validation(self):
        self.client.force_authenticate(user=self.user)
        self.assertEqual(self._post(rating=6).status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(self._post(rating=0).status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(self._post(comment="short").status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(self._post(comment="x" * 1001).status_code, status.HTTP_400_BAD_REQUEST)

    def test_unknown_product(self):
        self.client.force_authenticate(user=self.user)
        res = self._post(product_id="00000000-0000-0000-0000-000000000000")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)


class ReviewModerationTests(TestCase):
    """
    GUARANTEES:
    - Public listing shows approved reviews only, newest first
    - Moderation stamps the reviewer and recomputes Product.rating
    - Stats and the admin envelope report counts per status
    """

    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="admin@example.com", password="pass12345", role=ROLE_ADMIN)
        self.product = Product.objects.create(title="Linen Sheets", base_price=Decimal("2500000"))
        self.reviews = [
            Review.objects.create(
                product=self.product,
                user=User.objects.create_user(email=f"r{i}@example.com", password="pass12345"),
                rating=rating,
                comment=COMMENT,
            )
            for i, rating in enumerate([5, 4, 2])
        ]

    def _moderate(self, review, new_status, note=""):
        return self.client.patch(
            f"/api/reviews/{review.id}/status/",
            {"status": new_status, "admin_note": note},
            format="json",
        )

    def test_moderation_requires_admin(self):
        self.client.force_authenticate(user=self.reviews[0].user)
        res = self._moderate(self.reviews[0], Review.STATUS_APPROVED)
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_approve_recomputes_rating(self):
        self.client.force_authenticate(user=self.admin)

        res = self._moderate(self.reviews[0], Review.STATUS_APPROVED)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["message"], "نظر تأیید شد")
        self._moderate(self.reviews[1], Review.STATUS_APPROVED)

        self.product.refresh_from_db()
        self.assertEqual(self.product.rating, Decimal("4.5"))

        review = Review.objects.get(pk=self.reviews[0].pk)
        self.assertEqual(review.reviewed_by, self.admin)
        self.assertIsNotNone(review.reviewed_at)

    def test_reject_message_and_note(self):
        self.client.force_authenticate(user=self.admin)
        res = self._moderate(self.reviews[2], Review.STATUS_REJECTED, note="off-topic")

        self.assertEqual(res.data["message"], "نظر رد شد")
        self.assertEqual(Review.objects.get(pk=self.reviews[2].pk).admin_note, "off-topic")

    def test_invalid_status(self):
        self.client.force_authenticate(user=self.admin)
        res = self._moderate(self.reviews[0], Review.STATUS_PENDING)
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_public_list_approved_only(self):
        Review.objects.filter(pk__in=[self.reviews[0].pk, self.reviews[2].pk]).update(status=Review.STATUS_APPROVED)

        res = self.client.get(f"/api/reviews/product/{self.product.id}/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertCountEqual([r["rating"] for r in res.data["data"]], [2, 5])

        res = self.client.get(f"/api/reviews/product/{self.product.id}/?limit=1")
        self.assertEqual(len(res.data["data"]), 1)

    def test_stats(self):
        self.client.force_authenticate(user=self.admin)
        self._moderate(self.reviews[0], Review.STATUS_APPROVED)
        self._moderate(self.reviews[2], Review.STATUS_REJECTED)
        self.client.force_authenticate(user=None)

        res = self.client.get(f"/api/reviews/stats/?product={self.product.id}")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(
            res.data,
            {"total": 3, "pending": 1, "approved": 1, "rejected": 1, "average_rating": 5.0},
        )

    def test_admin_list_envelope(self):
        self.client.force_authenticate(user=self.admin)
        res = self.client.get("/api/reviews/?status=pending&limit=2")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["total"], 3)
        self.assertEqual(res.data["limit"], 2)
        self.assertEqual(res.data["total_pages"], 2)
        self.assertEqual(len(res.data["reviews"]), 2)

    def test_delete_recomputes_rating(self):
        self.client.force_authenticate(user=self.admin)
        self._moderate(self.reviews[0], Review.STATUS_APPROVED)
        self._moderate(self.reviews[2], Review.STATUS_APPROVED)

        res = self.client.delete(f"/api/reviews/{self.reviews[0].id}/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["message"], "نظر حذف شد")

        self.product.refresh_from_db()
        self.assertEqual(self.product.rating, Decimal("2.0"))

        res = self.client.delete(f"/api/reviews/{self.reviews[0].id}/")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["message"], "نظر پیدا نشد")
