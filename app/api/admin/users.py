"""관리자 사용자 라우터 — 사용자 역할 변경 API.

Admin User Router — Role change endpoint. The admin router's dependencies
enforce the ADMIN role and access-log each request before this handler runs.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.user import UserRoleChangeRequest
from app.services.user_service import user_service

router: APIRouter = APIRouter()


@router.patch("/{user_id}", response_model=MessageResponse)
async def change_user_role(
    user_id: UUID,
    data: UserRoleChangeRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """사용자 역할을 변경합니다. 관리자만 가능.

    Change a user's role. Admin only.
    """
    await user_service.change_role(db, user_id, data)
    await db.commit()

    return {"message": "역할이 변경되었습니다 (Role changed)"}
