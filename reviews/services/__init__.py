from .exceptions import DuplicateReviewError, ReviewNotFoundError
from .reviews import create_review, delete_review, moderate, recompute_product_rating, review_stats

__all__ = [
    "DuplicateReviewError",
    "ReviewNotFoundError",
    "create_review",
    "delete_review",
    "moderate",
    "recompute_product_rating",
    "review_stats",
]
