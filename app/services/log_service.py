"""요청 로그 서비스 — 독립 트랜잭션 감사 로그.

Log Service — Writes audit rows in their own session and transaction, so a
row survives even when the request that produced it is rolled back.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.database import async_session
from app.models.log import Log
from app.repositories.log_repository import log_repository

logger = structlog.get_logger(__name__)


class LogService:
    """독립 트랜잭션 로그 서비스.

    Attributes:
        session_factory: 로그 전용 세션 팩토리 (Session factory used for log writes)
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory: async_sessionmaker[AsyncSession] = session_factory

    async def save_log(self, message: str) -> Log:
        """로그를 별도 세션에서 저장하고 즉시 커밋합니다.

        Persist a log row and commit it independently of the caller's session.
        """
        async with self.session_factory() as session:
            log: Log = await log_repository.create(session, {"message": message})
            await session.commit()
        logger.info("request_log_saved", log_id=str(log.id), message=message)
        return log


# 싱글턴 인스턴스 — Singleton instance
log_service: LogService = LogService(async_session)
