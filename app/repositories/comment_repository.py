"""댓글 레포지토리 — 댓글 관련 DB 쿼리 담당.

Comment Repository — Handles comment queries. Authors are always join-fetched
so listing N comments costs one SELECT.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.models.comment import Comment
from app.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """댓글 레포지토리.

    Extends:
        BaseRepository[Comment]
    """

    def __init__(self) -> None:
        super().__init__(Comment)

    async def get_by_todo_with_user(
        self,
        db: AsyncSession,
        todo_id: UUID,
    ) -> Sequence[Comment]:
        """일정의 댓글 목록을 작성자와 함께 조회합니다.

        Retrieve comments of a todo with authors joined, oldest first.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            todo_id: 일정 UUID (Todo UUID)

        Returns:
            Sequence[Comment]: 작성자가 로드된 댓글 목록 (Comments with user loaded)
        """
        query: Select = (
            select(Comment)
            .options(joinedload(Comment.user))
            .where(Comment.todo_id == todo_id)
            .order_by(Comment.created_at)
        )
        result = await db.execute(query)
        return result.scalars().all()


# 싱글턴 인스턴스 — Singleton instance
comment_repository: CommentRepository = CommentRepository()
