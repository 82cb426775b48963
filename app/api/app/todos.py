"""일정 라우터 — 일정 생성, 조건 조회, 요약 검색, 단건 조회 API.

Todo Router — API endpoints for todo creation, filtered listing,
summary search and single lookup.
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.database import get_db
from app.models.user import User
from app.schemas.common import PaginatedResponse
from app.schemas.todo import TodoResponse, TodoSaveRequest, TodoSaveResponse
from app.services.todo_service import todo_service

router: APIRouter = APIRouter()


@router.post("", response_model=TodoSaveResponse, status_code=201)
async def save_todo(
    data: TodoSaveRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> TodoSaveResponse:
    """새 일정을 생성합니다. 작성자는 첫 담당자로 등록됩니다.

    Create a todo. The caller becomes its owner and first manager.
    """
    result: TodoSaveResponse = await todo_service.save_todo(db, current_user, data)
    await db.commit()
    return result


@router.get("", response_model=PaginatedResponse)
async def get_todos(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
    weather: Annotated[str | None, Query()] = None,
    start: Annotated[datetime | None, Query(description="수정일 시작 (modified_at >= start)")] = None,
    end: Annotated[datetime | None, Query(description="수정일 끝 (modified_at <= end)")] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1, le=100)] = 10,
) -> dict:
    """일정 목록을 조회합니다. 날씨와 수정일 범위는 모두 선택 조건입니다.

    List todos; every filter is optional and absent filters exclude nothing.
    """
    result = await todo_service.get_todos(
        db,
        weather=weather,
        start=start,
        end=end,
        page=page,
        per_page=per_page,
    )
    return result.model_dump()


@router.get("/search", response_model=PaginatedResponse)
async def search_todos(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
    title: Annotated[str | None, Query()] = None,
    nickname: Annotated[str | None, Query(description="담당자 닉네임 부분 일치")] = None,
    start: Annotated[datetime | None, Query(description="생성일 시작 (created_at >= start)")] = None,
    end: Annotated[datetime | None, Query(description="생성일 끝 (created_at <= end)")] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1, le=100)] = 10,
) -> dict:
    """제목, 담당자 닉네임, 생성일로 일정 요약을 검색합니다.

    Search todo summaries with manager and comment counts.
    """
    result = await todo_service.search_todos(
        db,
        title=title,
        nickname=nickname,
        start=start,
        end=end,
        page=page,
        per_page=per_page,
    )
    return result.model_dump()


@router.get("/{todo_id}", response_model=TodoResponse)
async def get_todo(
    todo_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> TodoResponse:
    """일정 단건을 작성자와 함께 조회합니다.

    Get one todo with its owner.
    """
    return await todo_service.get_todo(db, todo_id)
