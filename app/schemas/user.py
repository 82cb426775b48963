"""사용자 관련 Pydantic 요청/응답 스키마 정의.

User Pydantic request/response schema definitions.
Covers user lookup, password change and admin role change.
"""

from pydantic import BaseModel


class UserResponse(BaseModel):
    """사용자 조회 응답 스키마.

    Attributes:
        id: 사용자 UUID (User identifier)
        email: 이메일 (Login email)
        nickname: 닉네임 (Display name)
    """

    id: str
    email: str
    nickname: str


class UserChangePasswordRequest(BaseModel):
    """비밀번호 변경 요청 스키마.

    Password change request schema. The new password must be at least
    8 characters and contain a digit and an uppercase letter.

    Attributes:
        old_password: 기존 비밀번호 (Current password)
        new_password: 새 비밀번호 (New password)
    """

    old_password: str
    new_password: str


class UserRoleChangeRequest(BaseModel):
    """역할 변경 요청 스키마 (관리자용).

    Admin-only role change request schema.
    """

    role: str  # 변경할 역할 — "USER"|"ADMIN"
