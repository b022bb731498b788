"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns
and the payment/account/bank domain errors raised by the service layer.
These simplify error raising across services and repositories by
eliminating the need to specify status codes at each call site.

Usage:
    from app.utils.exceptions import NotFoundError, ValidationError
    raise NotFoundError("Payment with ID 7 not found.")
    raise ValidationError(["Payment details cannot be null or empty."])
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested payment, account or bank does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when attempting to create a resource that violates a uniqueness constraint
    (e.g. a second bank with the same BIC).

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches
    (e.g. a negative skip count).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ValidationError(BadRequestError):
    """400 검증 실패 예외 — 모든 규칙 위반 메시지를 함께 전달.

    Validation failure carrying every rule violation found in the payload.
    The response body is ``{"detail": {"message": ..., "errors": [...]}}``.

    Args:
        errors: 규칙 위반 메시지 목록 (Rule violation messages)
        message: 요약 메시지 (Summary message, default: "Validation failed.")
    """

    def __init__(self, errors: list[str], message: str = "Validation failed.") -> None:
        self.errors: list[str] = list(errors)
        self.message: str = message
        super().__init__()
        self.detail = {"message": message, "errors": self.errors}


# === 도메인 예외 (Domain errors) ===
# 예상하지 못한 DB 오류를 감싸는 500 예외와, 유일성 위반을 나타내는 409 예외


class PaymentError(HTTPException):
    """결제 처리 실패 — 서비스 계층에서 DB 오류를 감쌀 때 사용 (500)."""

    def __init__(self, detail: str = "Payment operation failed") -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class PaymentAlreadyExistsError(DuplicateError):
    """동일한 결제가 이미 존재함 (409)."""


class AccountError(HTTPException):
    """계좌 처리 실패 (500)."""

    def __init__(self, detail: str = "Account operation failed") -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class AccountAlreadyExistsError(DuplicateError):
    """동일한 계좌가 이미 존재함 (409)."""


class BankError(HTTPException):
    """은행 처리 실패 (500)."""

    def __init__(self, detail: str = "Bank operation failed") -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class BankAlreadyExistsError(DuplicateError):
    """동일한 BIC의 은행이 이미 존재함 (409)."""


def is_unique_violation(exc: Exception) -> bool:
    """유일성 제약 위반 여부 — PostgreSQL과 SQLite 메시지 모두 처리.

    Whether a database IntegrityError was caused by a unique constraint
    (PostgreSQL "duplicate key", SQLite "UNIQUE constraint failed").
    """
    message: str = str(getattr(exc, "orig", exc)).lower()
    return "duplicate key" in message or "unique constraint" in message
