"""데이터베이스 엔진, 세션, 스키마 초기화 모듈.

Database module — async engine, session factory, declarative base and the
startup/shutdown hooks used by the application lifespan.
PostgreSQL (asyncpg) in production; SQLite (aiosqlite) URLs are accepted
for local runs and tests.
"""

from collections.abc import AsyncGenerator
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    """모든 ORM 모델의 선언적 베이스 (Declarative base for all ORM models)."""


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """URL에 맞는 옵션으로 비동기 엔진을 생성합니다.

    Create the async engine. Pool sizing applies to server databases only;
    SQLite keeps SQLAlchemy's default pool.
    """
    options: dict[str, Any] = {"echo": echo}
    if not url.startswith("sqlite"):
        # pool_pre_ping: 풀에서 꺼낸 연결을 사용 전 검증 (validate pooled connections)
        options.update(pool_pre_ping=True, pool_size=5, max_overflow=10)
    return create_async_engine(url, **options)


engine: AsyncEngine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

# expire_on_commit=False: 커밋 후에도 응답 구성에 객체 속성 사용 가능
# (ORM attributes stay readable after commit while responses are built)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db() -> None:
    """테이블이 없으면 생성합니다 (Create missing tables on startup)."""
    # 모든 모델을 메타데이터에 등록 (register every model with the metadata)
    import app.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("database_schema_ready", tables=sorted(Base.metadata.tables))


async def dispose_db() -> None:
    """커넥션 풀을 닫습니다 (Close pooled connections on shutdown)."""
    await engine.dispose()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 비동기 세션을 제공합니다.

    FastAPI dependency yielding one session per request. Routers commit
    explicitly; anything still pending when the request fails is rolled back.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
