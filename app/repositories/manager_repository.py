"""담당자 레포지토리 — 일정 담당자 관련 DB 쿼리 담당.

Manager Repository — Handles todo manager queries.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.models.todo import Manager
from app.repositories.base import BaseRepository


class ManagerRepository(BaseRepository[Manager]):
    """담당자 레포지토리.

    Extends:
        BaseRepository[Manager]
    """

    def __init__(self) -> None:
        super().__init__(Manager)

    async def get_by_todo_with_user(
        self,
        db: AsyncSession,
        todo_id: UUID,
    ) -> Sequence[Manager]:
        """일정의 담당자 목록을 사용자 정보와 함께 조회합니다.

        Retrieve managers of a todo with their users joined, in
        registration order (the owner comes first).
        """
        query: Select = (
            select(Manager)
            .options(joinedload(Manager.user))
            .where(Manager.todo_id == todo_id)
            .order_by(Manager.created_at)
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def get_assignment(
        self,
        db: AsyncSession,
        todo_id: UUID,
        user_id: UUID,
    ) -> Manager | None:
        """특정 일정의 특정 사용자 담당자 레코드를 조회합니다.

        Retrieve the manager row linking a user to a todo, if any.
        """
        query: Select = select(Manager).where(
            Manager.todo_id == todo_id,
            Manager.user_id == user_id,
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
manager_repository: ManagerRepository = ManagerRepository()
