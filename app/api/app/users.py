"""사용자 라우터 — 사용자 조회, 비밀번호 변경 API.

User Router — User lookup and self-service password change.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.database import get_db
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.user import UserChangePasswordRequest, UserResponse
from app.services.user_service import user_service

router: APIRouter = APIRouter()


@router.put("/password", response_model=MessageResponse)
async def change_password(
    data: UserChangePasswordRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict:
    """현재 사용자의 비밀번호를 변경합니다 (Change my password)."""
    await user_service.change_password(db, current_user, data)
    await db.commit()

    return {"message": "비밀번호가 변경되었습니다 (Password changed)"}


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> UserResponse:
    """사용자를 조회합니다 (Get a user by id)."""
    return await user_service.get_user(db, user_id)
