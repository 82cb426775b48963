"""테스트 인프라 — 임시 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Temporary SQLite DB, session, and httpx client fixtures.
Each test gets its own database file under tmp_path, so no cleanup is needed.
NullPool gives every session its own connection, which keeps the
independent-transaction log writes honest.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models.todo import Todo
from app.models.user import User
from app.repositories.todo_repository import todo_repository
from app.services.log_service import log_service
from app.utils.jwt import build_claims, create_access_token
from app.utils.password import hash_password
from app.utils.weather import weather_client

TEST_WEATHER = "Sunny"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 새 DB 파일에 스키마를 생성합니다."""
    eng = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
        poolclass=NullPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    async with session_factory() as session:
        yield session


@pytest.fixture(autouse=True)
def log_sessions(monkeypatch, session_factory) -> None:
    """로그 서비스가 테스트 DB에 기록하도록 세션 팩토리를 교체합니다."""
    monkeypatch.setattr(log_service, "session_factory", session_factory)


@pytest.fixture(autouse=True)
def fake_weather(monkeypatch) -> None:
    """외부 날씨 피드 대신 고정된 날씨를 반환합니다."""
    async def _today() -> str:
        return TEST_WEATHER

    monkeypatch.setattr(weather_client, "get_today_weather", _today)


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# 데이터는 커밋합니다. 로그 서비스가 별도 연결로 쓰기 때문입니다.
# (Data is committed; the log service writes through a second connection.)
# ---------------------------------------------------------------------------
async def create_user(
    db: AsyncSession,
    email: str,
    nickname: str,
    password: str = "Password1",
    role: str = "USER",
) -> User:
    user = User(
        email=email,
        nickname=nickname,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    await db.commit()
    return user


@pytest_asyncio.fixture
async def owner(db: AsyncSession) -> User:
    """일정 작성자 사용자를 생성합니다."""
    return await create_user(db, "owner@test.com", "owner")


@pytest_asyncio.fixture
async def other_user(db: AsyncSession) -> User:
    """다른 일반 사용자를 생성합니다."""
    return await create_user(db, "other@test.com", "other")


@pytest_asyncio.fixture
async def admin_user(db: AsyncSession) -> User:
    """관리자 사용자를 생성합니다."""
    return await create_user(db, "admin@test.com", "admin", role="ADMIN")


@pytest.fixture
def make_todo(db: AsyncSession) -> Callable[..., Awaitable[Todo]]:
    """작성자를 담당자로 포함한 일정을 생성하는 팩토리."""
    async def _make(
        user: User,
        title: str = "Write report",
        contents: str = "Quarterly numbers",
        weather: str = TEST_WEATHER,
    ) -> Todo:
        todo = await todo_repository.create_with_owner(
            db, owner=user, title=title, contents=contents, weather=weather
        )
        await db.commit()
        return todo

    return _make


def make_token(user: User) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token(build_claims(user))


@pytest.fixture
def owner_token(owner) -> str:
    return make_token(owner)


@pytest.fixture
def other_token(other_user) -> str:
    return make_token(other_user)


@pytest.fixture
def admin_token(admin_user) -> str:
    return make_token(admin_user)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class StatementCounter:
    """엔진에서 실행된 SELECT 문을 기록합니다 (Record SELECTs run on an engine)."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.statements: list[str] = []

    def _record(self, conn, cursor, statement, parameters, context, executemany) -> None:
        if statement.lstrip().upper().startswith("SELECT"):
            self.statements.append(statement)

    def __enter__(self) -> "StatementCounter":
        event.listen(self.engine.sync_engine, "before_cursor_execute", self._record)
        return self

    def __exit__(self, *exc) -> None:
        event.remove(self.engine.sync_engine, "before_cursor_execute", self._record)
