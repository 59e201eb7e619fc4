# banners/services/exceptions.py

from backend.exceptions import NotFoundError


class BannerNotFoundError(NotFoundError):
    code = "BANNER_NOT_FOUND"

    def __init__(self, message: str = "بنر یافت نشد"):
        super().__init__(message)
