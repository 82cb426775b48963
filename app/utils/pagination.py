"""페이지네이션 유틸리티.

Pagination helpers for async SQLAlchemy selects. ``paginate`` runs the
count and the page fetch; ``build_page`` wraps the serialized items in the
envelope every list endpoint returns.
"""

import math
from typing import Any, Sequence

from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


class Page(BaseModel):
    """목록 응답 봉투 (List response envelope).

    Attributes:
        items: 현재 페이지 항목 (Items on this page)
        total: 조건에 맞는 전체 개수 (Matches across all pages)
        page: 1부터 시작하는 페이지 번호 (1-based page number)
        per_page: 페이지 크기 (Page size)
        pages: 전체 페이지 수 (ceil(total / per_page))
    """

    items: list[Any]
    total: int
    page: int
    per_page: int
    pages: int


def build_page(items: list[Any], total: int, page: int, per_page: int) -> Page:
    """항목과 전체 개수로 Page를 만듭니다 (Wrap one page of items)."""
    pages: int = math.ceil(total / per_page) if per_page > 0 else 0
    return Page(items=items, total=total, page=page, per_page=per_page, pages=pages)


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page: int = 1,
    per_page: int = 10,
    scalars: bool = True,
) -> tuple[Sequence[Any], int]:
    """쿼리의 전체 개수와 한 페이지를 조회합니다.

    Count the query's matches, then fetch one page with OFFSET/LIMIT.
    ORDER BY is stripped from the count subquery.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: 정렬까지 적용된 SELECT (Fully built, ordered select)
        page: 1부터 시작 (1-based page number)
        per_page: 페이지 크기 (Page size)
        scalars: True면 ORM 엔티티, False면 Row 반환
                 (Entities when True, column rows when False)

    Returns:
        tuple[Sequence[Any], int]: (페이지 항목, 전체 개수) (Page items, total)
    """
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    result = await db.execute(query.offset((page - 1) * per_page).limit(per_page))
    items: Sequence[Any] = result.scalars().all() if scalars else result.all()

    return items, total
