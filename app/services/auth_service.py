"""인증 서비스 — 회원가입, 로그인 비즈니스 로직.

Auth Service — Business logic for signup and signin.
Issues bearer access tokens carrying the user's id, email, nickname and role.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User, UserRole
from app.repositories.user_repository import user_repository
from app.schemas.auth import SigninRequest, SignupRequest, TokenResponse
from app.utils.exceptions import BadRequestError, UnauthorizedError
from app.utils.jwt import build_claims, create_access_token
from app.utils.password import hash_password, verify_password

logger = structlog.get_logger(__name__)


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling authentication business logic.
    """

    def _issue_token(self, user: User) -> TokenResponse:
        """사용자에 대한 액세스 토큰을 발급합니다 (Issue an access token for a user)."""
        return TokenResponse(access_token=create_access_token(build_claims(user)))

    async def signup(
        self,
        db: AsyncSession,
        data: SignupRequest,
    ) -> TokenResponse:
        """회원가입을 처리합니다.

        Register a new user and return an access token.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 회원가입 요청 데이터 (Signup request data)

        Returns:
            TokenResponse: 토큰 응답 (Token response)

        Raises:
            BadRequestError: 이메일 중복 또는 잘못된 역할일 때
                             (Duplicate email or unknown role)
        """
        if await user_repository.email_exists(db, data.email):
            raise BadRequestError("이미 존재하는 이메일입니다 (Email already registered)")

        role: UserRole | None = UserRole.parse(data.user_role)
        if role is None:
            raise BadRequestError("유효하지 않은 UserRole 입니다 (Invalid user role)")

        user: User = await user_repository.create(
            db,
            {
                "email": data.email,
                "password_hash": hash_password(data.password),
                "nickname": data.nickname,
                "role": role.value,
            },
        )
        logger.info("user_signed_up", user_id=str(user.id), role=user.role)
        return self._issue_token(user)

    async def signin(
        self,
        db: AsyncSession,
        data: SigninRequest,
    ) -> TokenResponse:
        """로그인을 처리합니다.

        Verify credentials and return an access token.

        Raises:
            BadRequestError: 가입되지 않은 이메일일 때 (Unknown email)
            UnauthorizedError: 비밀번호 불일치 (Wrong password)
        """
        user: User | None = await user_repository.get_by_email(db, data.email)
        if user is None:
            raise BadRequestError("가입되지 않은 유저입니다 (User not registered)")

        if not verify_password(data.password, user.password_hash):
            raise UnauthorizedError("잘못된 비밀번호입니다 (Wrong password)")

        return self._issue_token(user)


# 싱글턴 인스턴스 — Singleton instance
auth_service: AuthService = AuthService()
