"""일정 레포지토리 — 일정 관련 DB 쿼리 담당.

Todo Repository — Handles all todo-related database queries.
Extends BaseRepository with optional-filter search, owner join fetch,
owner-as-manager creation and the title/nickname summary search.
"""

from datetime import datetime, timezone
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, Select, and_, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.models.comment import Comment
from app.models.todo import Manager, Todo
from app.models.user import User
from app.repositories.base import BaseRepository
from app.utils.pagination import paginate


def to_utc(value: datetime | None) -> datetime | None:
    """비교용 시각을 UTC로 정규화합니다. naive 값은 UTC로 간주합니다.

    Normalise a timestamp for comparison. Naive values are taken as UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TodoRepository(BaseRepository[Todo]):
    """일정 레포지토리.

    Todo repository with dynamic filtering and eager owner loading.

    Extends:
        BaseRepository[Todo]
    """

    def __init__(self) -> None:
        super().__init__(Todo)

    def build_filters(
        self,
        weather: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[ColumnElement[bool]]:
        """주어진 조건만으로 WHERE 절 목록을 만듭니다.

        Build one predicate per supplied filter. Absent filters contribute
        nothing, so they never exclude a todo. An empty-string weather is a
        supplied value, not an absent one.

        Args:
            weather: 날씨 태그 (Weather tag, exact match)
            start: 수정일 하한, 포함 (Inclusive lower bound on modified_at)
            end: 수정일 상한, 포함 (Inclusive upper bound on modified_at)

        Returns:
            list[ColumnElement[bool]]: 적용할 조건 목록 (Predicates to AND together)
        """
        predicates: list[ColumnElement[bool]] = []
        if weather is not None:
            predicates.append(Todo.weather == weather)
        if start is not None:
            predicates.append(Todo.modified_at >= to_utc(start))
        if end is not None:
            predicates.append(Todo.modified_at <= to_utc(end))
        return predicates

    def filtered_query(
        self,
        weather: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> Select:
        """필터와 작성자 fetch join이 적용된 SELECT를 구성합니다.

        Compose the filtered SELECT. The owner is fetched through a single
        LEFT OUTER JOIN so reading todo.user never issues another query.
        """
        query: Select = select(Todo).options(joinedload(Todo.user))

        predicates = self.build_filters(weather, start, end)
        if predicates:
            query = query.where(and_(*predicates))

        return query.order_by(Todo.modified_at.desc())

    async def find_by_filters(
        self,
        db: AsyncSession,
        weather: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> Sequence[Todo]:
        """조건에 맞는 모든 일정을 작성자와 함께 조회합니다.

        Return every todo satisfying the supplied filters, owners loaded.
        start > end simply yields an empty sequence.
        """
        result = await db.execute(self.filtered_query(weather, start, end))
        return result.scalars().all()

    async def get_filtered(
        self,
        db: AsyncSession,
        weather: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        page: int = 1,
        per_page: int = 10,
    ) -> tuple[Sequence[Todo], int]:
        """조건에 맞는 일정을 페이지네이션하여 조회합니다.

        Paginated variant of find_by_filters.

        Returns:
            tuple[Sequence[Todo], int]: (일정 목록, 전체 개수)
                                        (List of todos, total count)
        """
        query: Select = self.filtered_query(weather, start, end)
        return await self.get_paginated(db, query, page, per_page)

    async def get_with_user(
        self,
        db: AsyncSession,
        todo_id: UUID,
    ) -> Todo | None:
        """일정 단건을 작성자와 함께 조회합니다.

        Retrieve one todo with its owner joined in the same SELECT.
        Returns None when the id does not exist; never raises for a miss.
        """
        query: Select = (
            select(Todo)
            .options(joinedload(Todo.user))
            .where(Todo.id == todo_id)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def create_with_owner(
        self,
        db: AsyncSession,
        owner: User,
        title: str,
        contents: str,
        weather: str,
    ) -> Todo:
        """일정을 생성하고 작성자를 첫 담당자로 등록합니다.

        Create a todo and enrol its owner as the first manager. Both rows are
        written by the same flush, so they commit or roll back together.
        """
        todo: Todo = Todo(
            title=title,
            contents=contents,
            weather=weather,
            user=owner,
        )
        todo.managers.append(Manager(user=owner))
        db.add(todo)
        await db.flush()
        return todo

    async def search_summaries(
        self,
        db: AsyncSession,
        title: str | None = None,
        nickname: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        page: int = 1,
        per_page: int = 10,
    ) -> tuple[Sequence[Any], int]:
        """제목/담당자 닉네임/생성일로 일정 요약을 검색합니다.

        Search todo summaries. Each optional filter is applied only when
        given: case-insensitive title substring, created_at range, and a
        manager whose nickname contains the given text. Counts are computed
        with correlated subqueries so the nickname filter does not shrink
        the manager count.

        Returns:
            tuple[Sequence[Row], int]: ((title, manager_count, comment_count) 행, 전체 개수)
        """
        manager_count = (
            select(func.count(Manager.id))
            .where(Manager.todo_id == Todo.id)
            .correlate(Todo)
            .scalar_subquery()
        )
        comment_count = (
            select(func.count(Comment.id))
            .where(Comment.todo_id == Todo.id)
            .correlate(Todo)
            .scalar_subquery()
        )

        query: Select = select(
            Todo.title,
            manager_count.label("manager_count"),
            comment_count.label("comment_count"),
        )

        predicates: list[ColumnElement[bool]] = []
        if title:
            predicates.append(Todo.title.icontains(title, autoescape=True))
        if start is not None:
            predicates.append(Todo.created_at >= to_utc(start))
        if end is not None:
            predicates.append(Todo.created_at <= to_utc(end))
        if nickname:
            predicates.append(
                exists(
                    select(Manager.id)
                    .join(User, User.id == Manager.user_id)
                    .where(
                        Manager.todo_id == Todo.id,
                        User.nickname.icontains(nickname, autoescape=True),
                    )
                )
            )
        if predicates:
            query = query.where(and_(*predicates))

        query = query.order_by(Todo.created_at.desc())
        return await paginate(db, query, page, per_page, scalars=False)


# 싱글턴 인스턴스 — Singleton instance
todo_repository: TodoRepository = TodoRepository()
