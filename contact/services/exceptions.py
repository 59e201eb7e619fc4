# contact/services/exceptions.py

from backend.exceptions import ApiError, NotFoundError

MSG_REQUIRED_FIELDS = "لطفاً تمام فیلدهای الزامی را پر کنید"


class ContactError(ApiError):
    code = "CONTACT_ERROR"


class ContactValidationError(ContactError):
    code = "VALIDATION_ERROR"

    def __init__(self, message: str = MSG_REQUIRED_FIELDS):
        super().__init__(message)


class ContactMessageNotFoundError(NotFoundError):
    code = "CONTACT_MESSAGE_NOT_FOUND"

    def __init__(self, message: str = "پیام یافت نشد"):
        super().__init__(message)
