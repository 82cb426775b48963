"""요청 로그 SQLAlchemy ORM 모델 정의.

Request log model. Rows are written in their own transaction so they survive
a rollback of the request that produced them.
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Log(Base):
    """요청 로그 모델 (Request audit log row)."""

    __tablename__ = "logs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 로그 메시지 — Human-readable description of the request
    message: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
