# reviews/services/reviews.py

"""
======================================================
PATH: reviews/services/reviews.py
======================================================
REVIEWS

- create_review():    one review per (user, product), starts pending
- moderate():         approve / reject, stamps reviewer, recomputes rating
- delete_review():    removes and recomputes rating
- review_stats():     {total, pending, approved, rejected, average_rating}

Product.rating = mean of APPROVED ratings, 1 decimal (0.0 when none).
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from django.db import IntegrityError, transaction
from django.db.models import Avg, Count, Q
from django.utils import timezone

from products.models import Product
from products.services.exceptions import ProductNotFoundError
from reviews.models import Review
from reviews.services.exceptions import DuplicateReviewError

logger = logging.getLogger(__name__)

ONE_DECIMAL = Decimal("0.1")


def _one_decimal(value) -> Decimal:
    if value is None:
        return Decimal("0.0")
    return Decimal(str(value)).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)


def recompute_product_rating(product_id) -> Decimal:
    avg = Review.objects.filter(product_id=product_id, status=Review.STATUS_APPROVED).aggregate(
        avg=Avg("rating")
    )["avg"]
    rating = _one_decimal(avg)
    Product.objects.filter(pk=product_id).update(rating=rating)
    return rating


def create_review(*, user, product_id, rating: int, comment: str) -> Review:
    product = Product.objects.filter(pk=product_id, is_active=True).first()
    if product is None:
        raise ProductNotFoundError()

    if Review.objects.filter(user=user, product=product).exists():
        raise DuplicateReviewError()

    try:
        with transaction.atomic():
            review = Review.objects.create(
                user=user,
                product=product,
                rating=rating,
                comment=comment.strip(),
            )
    except IntegrityError:
        raise DuplicateReviewError()

    logger.info("Review submitted", extra={"review_id": str(review.pk), "product_id": str(product.pk)})
    return review


@transaction.atomic
def moderate(review: Review, *, status: str, admin_note: str = "", reviewer=None) -> Review:
    review.status = status
    review.admin_note = admin_note or ""
    review.reviewed_by = reviewer
    review.reviewed_at = timezone.now()
    review.save(update_fields=["status", "admin_note", "reviewed_by", "reviewed_at", "updated_at"])

    recompute_product_rating(review.product_id)
    return review


@transaction.atomic
def delete_review(review: Review) -> None:
    product_id = review.product_id
    review.delete()
    recompute_product_rating(product_id)


def review_stats(product_id=None) -> dict:
    qs = Review.objects.all()
    if product_id:
        qs = qs.filter(product_id=product_id)

    row = qs.aggregate(
        total=Count("id"),
        pending=Count("id", filter=Q(status=Review.STATUS_PENDING)),
        approved=Count("id", filter=Q(status=Review.STATUS_APPROVED)),
        rejected=Count("id", filter=Q(status=Review.STATUS_REJECTED)),
        average=Avg("rating", filter=Q(status=Review.STATUS_APPROVED)),
    )
    return {
        "total": row["total"],
        "pending": row["pending"],
        "approved": row["approved"],
        "rejected": row["rejected"],
        "average_rating": float(_one_decimal(row["average"])),
    }
