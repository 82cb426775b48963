"""기본 CRUD 레포지토리 — 도메인 레포지토리의 공통 부모 클래스.

Base CRUD repository shared by the todo, manager, comment, user and log
repositories. Every method takes the caller's AsyncSession and only
flushes; committing belongs to the router (or to log_service, which owns
its session).

Usage:
    class CommentRepository(BaseRepository[Comment]):
        def __init__(self) -> None:
            super().__init__(Comment)
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import Select, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.utils.pagination import paginate

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """UUID 기본키 모델용 제네릭 레포지토리.

    Generic repository for models keyed by a UUID ``id`` column.
    Misses come back as None/False; database errors propagate unchanged.

    Attributes:
        model: 대상 ORM 모델 클래스 (ORM model this repository serves)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: UUID,
    ) -> ModelType | None:
        """기본키로 조회합니다. 연관 객체는 로드하지 않습니다.

        Fetch by primary key without eager loading. None when absent.
        """
        result = await db.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_paginated(
        self,
        db: AsyncSession,
        query: Select,
        page: int = 1,
        per_page: int = 10,
    ) -> tuple[Sequence[ModelType], int]:
        """쿼리 결과의 한 페이지와 전체 개수를 반환합니다 (One page plus total)."""
        return await paginate(db, query, page, per_page)

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """레코드를 추가하고 flush하여 기본값이 채워진 객체를 반환합니다.

        Insert a row and flush so generated ids and timestamps are populated.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 컬럼명과 값 (Column values keyed by attribute name)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        record_id: UUID,
        update_data: dict[str, Any],
    ) -> ModelType | None:
        """지정한 컬럼만 변경합니다. 레코드가 없으면 None.

        Apply the given column values. Unknown keys are ignored.
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        record_id: UUID,
    ) -> bool:
        """레코드를 삭제합니다. 삭제했으면 True (True when a row was removed)."""
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await db.flush()
        return True

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> bool:
        """모든 조건이 일치하는 레코드가 있는지 EXISTS로 확인합니다.

        Check with an EXISTS query whether a row matches every filter.
        """
        criteria = [
            getattr(self.model, column) == value
            for column, value in filters.items()
            if hasattr(self.model, column)
        ]
        query = select(exists().where(*criteria))
        return bool((await db.execute(query)).scalar())
