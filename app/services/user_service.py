"""사용자 서비스 — 사용자 조회, 비밀번호 변경, 역할 변경 비즈니스 로직.

User Service — Business logic for user lookup, password change and
admin role change.
"""

from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User, UserRole
from app.repositories.user_repository import user_repository
from app.schemas.common import UserSummary
from app.schemas.user import UserChangePasswordRequest, UserResponse, UserRoleChangeRequest
from app.utils.exceptions import BadRequestError, NotFoundError
from app.utils.password import hash_password, is_strong_password, verify_password

logger = structlog.get_logger(__name__)


def to_user_summary(user: User) -> UserSummary:
    """ORM 사용자를 응답용 요약으로 변환합니다 (ORM user to embedded summary)."""
    return UserSummary(id=str(user.id), email=user.email, nickname=user.nickname)


class UserService:
    """사용자 서비스.

    User service providing lookup, self-service password change and
    admin role change.
    """

    async def get_user(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> UserResponse:
        """사용자를 조회합니다.

        Raises:
            NotFoundError: 사용자가 없을 때 (When user not found)
        """
        user: User | None = await user_repository.get_by_id(db, user_id)
        if user is None:
            raise NotFoundError("사용자를 찾을 수 없습니다 (User not found)")
        return UserResponse(id=str(user.id), email=user.email, nickname=user.nickname)

    async def change_password(
        self,
        db: AsyncSession,
        user: User,
        data: UserChangePasswordRequest,
    ) -> None:
        """현재 사용자의 비밀번호를 변경합니다.

        Change the current user's password.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user: 인증된 사용자 (Authenticated user)
            data: 비밀번호 변경 요청 (Old and new password)

        Raises:
            BadRequestError: 새 비밀번호가 정책 위반, 기존과 동일, 또는 기존 비밀번호 불일치
                             (Weak new password, unchanged password, or wrong old password)
        """
        if not is_strong_password(data.new_password):
            raise BadRequestError(
                "새 비밀번호는 8자 이상이어야 하고, 숫자와 대문자를 포함해야 합니다 "
                "(New password needs 8+ characters with a digit and an uppercase letter)"
            )

        if verify_password(data.new_password, user.password_hash):
            raise BadRequestError("새 비밀번호는 기존 비밀번호와 같을 수 없습니다 (New password must differ)")

        if not verify_password(data.old_password, user.password_hash):
            raise BadRequestError("잘못된 비밀번호입니다 (Wrong password)")

        user.password_hash = hash_password(data.new_password)
        await db.flush()

    async def change_role(
        self,
        db: AsyncSession,
        user_id: UUID,
        data: UserRoleChangeRequest,
    ) -> None:
        """사용자 역할을 변경합니다 (관리자 전용).

        Change a user's role. Admin-only.

        Raises:
            BadRequestError: 잘못된 역할 (Unknown role)
            NotFoundError: 사용자가 없을 때 (When user not found)
        """
        role: UserRole | None = UserRole.parse(data.role)
        if role is None:
            raise BadRequestError("유효하지 않은 UserRole 입니다 (Invalid user role)")

        updated: User | None = await user_repository.update(db, user_id, {"role": role.value})
        if updated is None:
            raise NotFoundError("사용자를 찾을 수 없습니다 (User not found)")
        logger.info("user_role_changed", user_id=str(user_id), role=role.value)


# 싱글턴 인스턴스 — Singleton instance
user_service: UserService = UserService()
