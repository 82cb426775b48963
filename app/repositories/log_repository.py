"""요청 로그 레포지토리.

Log Repository — Persists audit log rows.
"""

from app.models.log import Log
from app.repositories.base import BaseRepository


class LogRepository(BaseRepository[Log]):
    """요청 로그 레포지토리 (Audit log repository)."""

    def __init__(self) -> None:
        super().__init__(Log)


# 싱글턴 인스턴스 — Singleton instance
log_repository: LogRepository = LogRepository()
