"""사용자 관련 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definitions.
Access control is a flat role tag on each user (USER or ADMIN).

Tables:
    - users: 사용자 계정 (User accounts with email login and role tag)
"""

import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class UserRole(str, enum.Enum):
    """사용자 역할 — 일반 사용자 또는 관리자.

    User role tag. ADMIN unlocks the /admin endpoints.
    """

    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def parse(cls, value: str) -> "UserRole | None":
        """대소문자 구분 없이 역할 문자열을 변환합니다 (Case-insensitive lookup)."""
        for role in cls:
            if role.value == value.upper():
                return role
        return None


class User(Base):
    """사용자 모델 — 시스템 사용자 계정 정보.

    User model — System user account information.
    Email is the login identifier and is globally unique.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        email: 로그인 이메일 (Login email, unique)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        nickname: 표시 이름 (Display name)
        role: 역할 태그 (Role tag, "USER" or "ADMIN")
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "users"

    # 사용자 고유 식별자 — User unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 로그인 이메일 — Login email (전역 고유, globally unique)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    # 비밀번호 해시 — bcrypt hashed password (평문 저장 금지, never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    # 닉네임 — Display name shown on todos, comments and managers
    nickname: Mapped[str] = mapped_column(String(100), nullable=False)
    # 역할 — "USER" or "ADMIN"
    role: Mapped[str] = mapped_column(String(20), nullable=False, default=UserRole.USER.value)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
