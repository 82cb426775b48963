"""담당자 라우터 — 일정 담당자 등록, 조회, 삭제 API.

Manager Router — Manager endpoints nested under /todos/{todo_id}.

Permission Matrix:
    - 담당자 등록/삭제: 일정 작성자만 (Todo owner only)
    - 담당자 조회: 인증된 사용자 (Any authenticated user)
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.database import get_db
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.manager import ManagerResponse, ManagerSaveRequest, ManagerSaveResponse
from app.services.manager_service import manager_service

router: APIRouter = APIRouter()


@router.post("/todos/{todo_id}/managers", response_model=ManagerSaveResponse, status_code=201)
async def save_manager(
    todo_id: UUID,
    data: ManagerSaveRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> ManagerSaveResponse:
    """일정에 담당자를 등록합니다. 일정 작성자만 가능.

    Register a manager on a todo. Todo owner only.
    """
    result: ManagerSaveResponse = await manager_service.save_manager(
        db, current_user, todo_id, data
    )
    await db.commit()
    return result


@router.get("/todos/{todo_id}/managers", response_model=list[ManagerResponse])
async def get_managers(
    todo_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> list[ManagerResponse]:
    """일정의 담당자 목록을 조회합니다 (List a todo's managers)."""
    return await manager_service.get_managers(db, todo_id)


@router.delete("/todos/{todo_id}/managers/{manager_id}", response_model=MessageResponse)
async def delete_manager(
    todo_id: UUID,
    manager_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict:
    """일정에서 담당자를 삭제합니다. 일정 작성자만 가능.

    Remove a manager from a todo. Todo owner only.
    """
    await manager_service.delete_manager(db, current_user, todo_id, manager_id)
    await db.commit()

    return {"message": "담당자가 삭제되었습니다 (Manager deleted)"}
