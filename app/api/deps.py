"""FastAPI 의존성 주입 모듈 — 인증, 권한 검사, 관리자 접근 로그.

FastAPI dependency injection module — Authentication and authorization.
Provides reusable dependencies for extracting the current user from JWT,
enforcing the ADMIN role, and access-logging admin requests.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. HTTPBearer가 토큰을 추출 (HTTPBearer extracts the token)
    3. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies JWT and returns payload)
    4. 페이로드의 "sub" 필드로 DB에서 사용자를 조회
       (User is fetched from DB using payload "sub" field)
"""

from datetime import datetime, timezone
from typing import Annotated
from uuid import UUID

import jwt
import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.user import User, UserRole
from app.repositories.user_repository import user_repository
from app.utils.exceptions import ForbiddenError, UnauthorizedError
from app.utils.jwt import decode_token

logger = structlog.get_logger(__name__)

# HTTP Bearer 토큰 추출기 — Authorization 헤더에서 JWT 토큰 추출
# (Extracts JWT token from Authorization: Bearer <token> header)
security: HTTPBearer = HTTPBearer()


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """JWT 토큰에서 현재 인증된 사용자를 추출합니다.

    Decode JWT from the Authorization header and return the authenticated user.

    Raises:
        UnauthorizedError: 토큰이 유효하지 않거나 만료됨, 또는 사용자가 없음
                            (Invalid or expired token, or user no longer exists)
    """
    try:
        payload: dict = decode_token(credentials.credentials)
        if payload.get("type") != "access":
            raise UnauthorizedError("Invalid token type")
        user_id: str | None = payload.get("sub")
        if user_id is None:
            raise UnauthorizedError("Invalid token")
        user_uuid: UUID = UUID(user_id)
    except UnauthorizedError:
        raise
    except (jwt.ExpiredSignatureError, jwt.InvalidTokenError, KeyError, ValueError):
        raise UnauthorizedError("Invalid or expired token")

    user: User | None = await user_repository.get_by_id(db, user_uuid)
    if user is None:
        raise UnauthorizedError("User not found")

    return user


async def require_admin(
    current_user: Annotated[User, Depends(get_current_user)],
) -> User:
    """관리자 역할 검사 의존성 (Allow only ADMIN users, 403 otherwise)."""
    if current_user.role != UserRole.ADMIN.value:
        raise ForbiddenError()
    return current_user


async def log_admin_access(
    request: Request,
    current_user: Annotated[User, Depends(require_admin)],
) -> None:
    """관리자 API 접근을 핸들러 실행 전에 기록합니다.

    Record every admin API access (who, when, what) before the handler runs.
    """
    logger.info(
        "admin_api_access",
        user_id=str(current_user.id),
        method=request.method,
        url=str(request.url),
        requested_at=datetime.now(timezone.utc).isoformat(),
    )
