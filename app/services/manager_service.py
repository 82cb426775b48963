"""담당자 서비스 — 일정 담당자 등록, 조회, 삭제 비즈니스 로직.

Manager Service — Business logic for registering, listing and removing
todo managers. Only the todo owner may change its managers.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.todo import Manager, Todo
from app.models.user import User
from app.repositories.manager_repository import manager_repository
from app.repositories.todo_repository import todo_repository
from app.repositories.user_repository import user_repository
from app.schemas.manager import ManagerResponse, ManagerSaveRequest, ManagerSaveResponse
from app.services.log_service import log_service
from app.services.user_service import to_user_summary
from app.utils.exceptions import BadRequestError, DuplicateError, NotFoundError


class ManagerService:
    """담당자 서비스.

    Manager service. Registration requests are audit-logged in an
    independent transaction before any validation runs.
    """

    async def _get_owned_todo(
        self,
        db: AsyncSession,
        todo_id: UUID,
        requester: User,
    ) -> Todo:
        """일정을 조회하고 요청자가 작성자인지 검증합니다.

        Load the todo and verify the requester owns it.

        Raises:
            NotFoundError: 일정이 없을 때 (When todo not found)
            BadRequestError: 요청자가 작성자가 아닐 때 (Requester is not the owner)
        """
        todo: Todo | None = await todo_repository.get_by_id(db, todo_id)
        if todo is None:
            raise NotFoundError("일정을 찾을 수 없습니다 (Todo not found)")
        if todo.user_id != requester.id:
            raise BadRequestError(
                "담당자를 등록하려고 하는 유저가 일정을 만든 유저가 아닙니다 "
                "(Only the todo owner can manage its managers)"
            )
        return todo

    async def save_manager(
        self,
        db: AsyncSession,
        requester: User,
        todo_id: UUID,
        data: ManagerSaveRequest,
    ) -> ManagerSaveResponse:
        """일정에 담당자를 등록합니다.

        Register a user as manager of a todo.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            requester: 요청자, 일정 작성자여야 함 (Requester, must own the todo)
            todo_id: 일정 UUID (Todo UUID)
            data: 담당자 등록 요청 (Manager registration request)

        Returns:
            ManagerSaveResponse: 등록된 담당자 (Registered manager)

        Raises:
            NotFoundError: 일정 또는 담당자 유저가 없을 때 (Todo or target user not found)
            BadRequestError: 작성자가 아니거나 본인을 등록할 때
                             (Requester is not owner, or owner registers themself)
            DuplicateError: 이미 등록된 담당자일 때 (User is already a manager)
        """
        await log_service.save_log(
            f"manager registration requested: requester={requester.id} "
            f"todo={todo_id} manager_user={data.manager_user_id}"
        )

        todo: Todo = await self._get_owned_todo(db, todo_id, requester)

        try:
            manager_user_id: UUID = UUID(data.manager_user_id)
        except ValueError as exc:
            raise BadRequestError("잘못된 사용자 ID 형식입니다 (Malformed user id)") from exc

        manager_user: User | None = await user_repository.get_by_id(db, manager_user_id)
        if manager_user is None:
            raise NotFoundError("등록하려고 하는 담당자 유저가 존재하지 않습니다 (Manager user not found)")

        if manager_user.id == todo.user_id:
            raise BadRequestError("일정 작성자는 본인을 담당자로 등록할 수 없습니다 (Owner cannot register themself)")

        if await manager_repository.get_assignment(db, todo.id, manager_user.id) is not None:
            raise DuplicateError("이미 등록된 담당자입니다 (User is already a manager)")

        manager: Manager = await manager_repository.create(
            db,
            {"todo_id": todo.id, "user_id": manager_user.id},
        )
        return ManagerSaveResponse(id=str(manager.id), user=to_user_summary(manager_user))

    async def get_managers(
        self,
        db: AsyncSession,
        todo_id: UUID,
    ) -> list[ManagerResponse]:
        """일정의 담당자 목록을 조회합니다.

        Raises:
            NotFoundError: 일정이 없을 때 (When todo not found)
        """
        todo: Todo | None = await todo_repository.get_by_id(db, todo_id)
        if todo is None:
            raise NotFoundError("일정을 찾을 수 없습니다 (Todo not found)")

        managers = await manager_repository.get_by_todo_with_user(db, todo_id)
        return [
            ManagerResponse(id=str(m.id), user=to_user_summary(m.user))
            for m in managers
        ]

    async def delete_manager(
        self,
        db: AsyncSession,
        requester: User,
        todo_id: UUID,
        manager_id: UUID,
    ) -> None:
        """일정에서 담당자를 삭제합니다.

        Remove a manager from a todo.

        Raises:
            NotFoundError: 일정 또는 담당자가 없을 때 (Todo or manager not found)
            BadRequestError: 작성자가 아니거나 다른 일정의 담당자일 때
                             (Requester is not owner, or manager belongs to another todo)
        """
        todo: Todo = await self._get_owned_todo(db, todo_id, requester)

        manager: Manager | None = await manager_repository.get_by_id(db, manager_id)
        if manager is None:
            raise NotFoundError("담당자를 찾을 수 없습니다 (Manager not found)")

        if manager.todo_id != todo.id:
            raise BadRequestError("해당 일정에 등록된 담당자가 아닙니다 (Manager does not belong to this todo)")

        await manager_repository.delete(db, manager.id)


# 싱글턴 인스턴스 — Singleton instance
manager_service: ManagerService = ManagerService()
