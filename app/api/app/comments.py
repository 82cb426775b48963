"""댓글 라우터 — 일정 댓글 작성 및 조회 API.

Comment Router — Comment endpoints nested under /todos/{todo_id}.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.database import get_db
from app.models.user import User
from app.schemas.comment import CommentResponse, CommentSaveRequest, CommentSaveResponse
from app.services.comment_service import comment_service

router: APIRouter = APIRouter()


@router.post("/todos/{todo_id}/comments", response_model=CommentSaveResponse, status_code=201)
async def save_comment(
    todo_id: UUID,
    data: CommentSaveRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> CommentSaveResponse:
    """일정에 댓글을 작성합니다 (Write a comment on a todo)."""
    result: CommentSaveResponse = await comment_service.save_comment(
        db, current_user, todo_id, data
    )
    await db.commit()
    return result


@router.get("/todos/{todo_id}/comments", response_model=list[CommentResponse])
async def get_comments(
    todo_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> list[CommentResponse]:
    """일정의 댓글 목록을 조회합니다 (List a todo's comments with authors)."""
    return await comment_service.get_comments(db, todo_id)
