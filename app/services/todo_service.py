"""일정 서비스 — 일정 생성, 조건 조회, 단건 조회, 요약 검색 비즈니스 로직.

Todo Service — Business logic for todo creation, filtered listing,
single lookup and summary search.
"""

from datetime import datetime
from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.todo import Todo
from app.models.user import User
from app.repositories.todo_repository import todo_repository
from app.schemas.todo import TodoResponse, TodoSaveRequest, TodoSaveResponse, TodoSearchResponse
from app.services.user_service import to_user_summary
from app.utils.exceptions import NotFoundError
from app.utils.pagination import Page, build_page
from app.utils.weather import weather_client

logger = structlog.get_logger(__name__)


class TodoService:
    """일정 서비스.

    Todo service. Reads always embed the owner, which the repository
    join-fetches together with the todo.
    """

    def build_response(self, todo: Todo) -> TodoResponse:
        """일정 응답을 구성합니다.

        Build the todo response. todo.user must already be loaded.
        """
        return TodoResponse(
            id=str(todo.id),
            title=todo.title,
            contents=todo.contents,
            weather=todo.weather,
            user=to_user_summary(todo.user),
            created_at=todo.created_at,
            modified_at=todo.modified_at,
        )

    async def save_todo(
        self,
        db: AsyncSession,
        owner: User,
        data: TodoSaveRequest,
    ) -> TodoSaveResponse:
        """새 일정을 생성합니다. 작성자는 자동으로 담당자로 등록됩니다.

        Create a todo tagged with today's weather. The owner becomes the
        first manager in the same unit of work.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            owner: 작성자 (Authenticated owner)
            data: 일정 생성 데이터 (Todo creation data)

        Returns:
            TodoSaveResponse: 생성된 일정 (Created todo)

        Raises:
            ServerError: 날씨 조회 실패 (Weather lookup failed)
        """
        weather: str = await weather_client.get_today_weather()

        todo: Todo = await todo_repository.create_with_owner(
            db,
            owner=owner,
            title=data.title,
            contents=data.contents,
            weather=weather,
        )
        logger.info("todo_created", todo_id=str(todo.id), user_id=str(owner.id))

        return TodoSaveResponse(
            id=str(todo.id),
            title=todo.title,
            contents=todo.contents,
            weather=todo.weather,
            user=to_user_summary(owner),
        )

    async def get_todos(
        self,
        db: AsyncSession,
        weather: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        page: int = 1,
        per_page: int = 10,
    ) -> Page:
        """조건에 맞는 일정 목록을 조회합니다. 모든 조건은 선택입니다.

        List todos matching the supplied filters, newest modification first.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            weather: 날씨 필터, 선택 (Optional weather filter)
            start: 수정일 시작, 선택 (Optional modified_at lower bound)
            end: 수정일 끝, 선택 (Optional modified_at upper bound)
            page: 페이지 번호 (Page number)
            per_page: 페이지당 항목 수 (Items per page)

        Returns:
            Page: 일정 페이지 (Page of TodoResponse)
        """
        todos, total = await todo_repository.get_filtered(
            db, weather, start, end, page, per_page
        )
        items: list[TodoResponse] = [self.build_response(t) for t in todos]
        return build_page(items, total, page, per_page)

    async def get_todo(
        self,
        db: AsyncSession,
        todo_id: UUID,
    ) -> TodoResponse:
        """일정 단건을 작성자와 함께 조회합니다.

        Get one todo with its owner.

        Raises:
            NotFoundError: 일정이 없을 때 (When todo not found)
        """
        todo: Todo | None = await todo_repository.get_with_user(db, todo_id)
        if todo is None:
            raise NotFoundError("일정을 찾을 수 없습니다 (Todo not found)")
        return self.build_response(todo)

    async def search_todos(
        self,
        db: AsyncSession,
        title: str | None = None,
        nickname: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        page: int = 1,
        per_page: int = 10,
    ) -> Page:
        """제목, 담당자 닉네임, 생성일 범위로 일정 요약을 검색합니다.

        Search todo summaries (title, manager count, comment count).
        """
        rows, total = await todo_repository.search_summaries(
            db, title, nickname, start, end, page, per_page
        )
        items: list[TodoSearchResponse] = [
            TodoSearchResponse(
                title=row.title,
                manager_count=row.manager_count,
                comment_count=row.comment_count,
            )
            for row in rows
        ]
        return build_page(items, total, page, per_page)


# 싱글턴 인스턴스 — Singleton instance
todo_service: TodoService = TodoService()
