# pages/services/exceptions.py

from backend.exceptions import NotFoundError


class PageNotFoundError(NotFoundError):
    code = "PAGE_NOT_FOUND"

    def __init__(self, message: str = "صفحه یافت نشد"):
        super().__init__(message)
