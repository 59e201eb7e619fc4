# reviews/services/exceptions.py

from backend.exceptions import ApiError, NotFoundError


class ReviewError(ApiError):
    code = "REVIEW_ERROR"


class DuplicateReviewError(ReviewError):
    code = "DUPLICATE_REVIEW"

    def __init__(self, message: str = "شما قبلاً برای این محصول نظر ثبت کرده‌اید"):
        super().__init__(message)


class ReviewNotFoundError(NotFoundError):
    code = "REVIEW_NOT_FOUND"

    def __init__(self, message: str = "نظر پیدا نشد"):
        super().__init__(message)
