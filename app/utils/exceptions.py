"""HTTP 예외 클래스 모듈.

HTTP exception classes raised by services and dependencies. FastAPI renders
each one as ``{"detail": ...}`` with the class's status code.

Usage:
    from app.utils.exceptions import NotFoundError
    raise NotFoundError("일정을 찾을 수 없습니다 (Todo not found)")
"""

from fastapi import HTTPException, status


class AppError(HTTPException):
    """상태 코드와 기본 메시지를 클래스에 고정한 HTTPException.

    HTTPException with the status code and default detail fixed per subclass.
    """

    code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(status_code=self.code, detail=detail or self.default_detail)


class BadRequestError(AppError):
    """400 — 비즈니스 규칙 위반.

    Business rule violations Pydantic cannot express: duplicate email,
    unknown role, weak or unchanged password, non-owner manager changes.
    """

    code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request"


class UnauthorizedError(AppError):
    """401 — 토큰 누락/만료/위조 또는 비밀번호 불일치 (Authentication failed)."""

    code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Authentication required"


class ForbiddenError(AppError):
    """403 — 관리자 역할 필요 (ADMIN role required)."""

    code = status.HTTP_403_FORBIDDEN
    default_detail = "Insufficient permissions"


class NotFoundError(AppError):
    """404 — 일정, 사용자, 담당자 없음 (Todo, user or manager does not exist)."""

    code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"


class DuplicateError(AppError):
    """409 — 이미 등록된 담당자 (User is already a manager of the todo)."""

    code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists"


class ServerError(AppError):
    """500 — 외부 연동 실패 (Upstream weather feed failed)."""
