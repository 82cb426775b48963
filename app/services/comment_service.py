"""댓글 서비스 — 댓글 작성 및 조회 비즈니스 로직.

Comment Service — Business logic for writing and listing comments.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.comment import Comment
from app.models.todo import Todo
from app.models.user import User
from app.repositories.comment_repository import comment_repository
from app.repositories.todo_repository import todo_repository
from app.schemas.comment import CommentResponse, CommentSaveRequest, CommentSaveResponse
from app.services.user_service import to_user_summary
from app.utils.exceptions import NotFoundError


class CommentService:
    """댓글 서비스."""

    async def _get_todo_or_404(self, db: AsyncSession, todo_id: UUID) -> Todo:
        todo: Todo | None = await todo_repository.get_by_id(db, todo_id)
        if todo is None:
            raise NotFoundError("일정을 찾을 수 없습니다 (Todo not found)")
        return todo

    async def save_comment(
        self,
        db: AsyncSession,
        author: User,
        todo_id: UUID,
        data: CommentSaveRequest,
    ) -> CommentSaveResponse:
        """일정에 댓글을 작성합니다.

        Write a comment on a todo.

        Raises:
            NotFoundError: 일정이 없을 때 (When todo not found)
        """
        await self._get_todo_or_404(db, todo_id)

        comment: Comment = await comment_repository.create(
            db,
            {
                "contents": data.contents,
                "user_id": author.id,
                "todo_id": todo_id,
            },
        )
        return CommentSaveResponse(
            id=str(comment.id),
            contents=comment.contents,
            user=to_user_summary(author),
        )

    async def get_comments(
        self,
        db: AsyncSession,
        todo_id: UUID,
    ) -> list[CommentResponse]:
        """일정의 댓글 목록을 작성자와 함께 조회합니다.

        List a todo's comments; authors come from the same query.

        Raises:
            NotFoundError: 일정이 없을 때 (When todo not found)
        """
        await self._get_todo_or_404(db, todo_id)

        comments = await comment_repository.get_by_todo_with_user(db, todo_id)
        return [
            CommentResponse(
                id=str(c.id),
                contents=c.contents,
                user=to_user_summary(c.user),
            )
            for c in comments
        ]


# 싱글턴 인스턴스 — Singleton instance
comment_service: CommentService = CommentService()
