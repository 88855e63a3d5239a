from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """(http_status, biz_code, default message)"""

    NOT_FOUND = (404, "TRK_404", "Resource not found")
    INVALID_INPUT = (400, "TRK_400", "Invalid input")
    DATABASE_ERROR = (500, "TRK_501", "Database error")
    INTERNAL_SERVER_ERROR = (500, "TRK_500", "Internal server error")

    def __init__(self, http_status: int, biz_code: str, default_message: str):
        self.http_status = http_status
        self.biz_code = biz_code
        self.default_message = default_message


class BusinessException(Exception):
    def __init__(self, error_code: ErrorCode, message: Optional[str] = None):
        self.error_code = error_code
        self.message = message or error_code.default_message
        super().__init__(self.message)


class NotFoundError(BusinessException):
    """The requested identifier has no stored row"""

    def __init__(self, message: Optional[str] = None):
        super().__init__(ErrorCode.NOT_FOUND, message)


class ValidationError(BusinessException):
    """An entity failed a structural check"""

    def __init__(self, message: str):
        super().__init__(ErrorCode.INVALID_INPUT, message)


class DatabaseError(BusinessException):
    """Storage failure; the original driver/ORM error is kept on ``cause``"""

    def __init__(self, cause: Exception, message: Optional[str] = None):
        self.cause = cause
        super().__init__(ErrorCode.DATABASE_ERROR, message or f"Database error: {cause}")


class InternalError(BusinessException):
    def __init__(self, message: str):
        super().__init__(ErrorCode.INTERNAL_SERVER_ERROR, f"Internal server error: {message}")
