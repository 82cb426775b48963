"""일정 관련 SQLAlchemy ORM 모델 정의.

Todo-related SQLAlchemy ORM model definitions.

Tables:
    - todos: 일정 (Todos with weather tag and owning user)
    - managers: 일정 담당자 (Todo-user responsibility junction)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Text, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Todo(Base):
    """일정 모델 — 사용자가 작성한 일정.

    Todo model — A todo item owned by exactly one user.
    The owner is registered as the first manager when the todo is created.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        title: 일정 제목 (Todo title)
        contents: 일정 내용 (Free-text body)
        weather: 작성일 날씨 (Weather tag captured at creation)
        user_id: 작성자 FK (Owning user, never null)
        created_at: 생성 일시 UTC (Creation timestamp)
        modified_at: 수정 일시 UTC (Last modification timestamp)

    Relationships:
        user: 작성자 (Owning user)
        managers: 담당자 목록 (Managers, cascade persist/delete)
        comments: 댓글 목록 (Comments, cascade delete)
    """

    __tablename__ = "todos"

    # 일정 고유 식별자 — Todo unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 일정 제목 — Todo title
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    # 일정 내용 — Todo body (full text)
    contents: Mapped[str] = mapped_column(Text, nullable=False)
    # 날씨 — Weather tag, e.g. "Sunny", "Rainy"
    weather: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    # 작성자 FK — Owning user (CASCADE: 사용자 삭제 시 일정도 삭제)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True)
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    modified_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc), index=True)

    # 관계 — Relationships
    user = relationship("User")
    managers = relationship("Manager", back_populates="todo", cascade="all, delete-orphan")
    comments = relationship("Comment", back_populates="todo", cascade="all, delete-orphan")


class Manager(Base):
    """일정 담당자 모델 — 일정과 사용자 간 다대다 연결 테이블.

    Manager model — Junction between Todo and User. Each row names one user
    responsible for one todo.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        todo_id: 일정 FK (Parent todo foreign key)
        user_id: 담당자 FK (Responsible user foreign key)
        created_at: 등록 일시 UTC (Registration timestamp)

    Relationships:
        todo: 소속 일정 (Parent todo)
        user: 담당자 (Responsible user)
    """

    __tablename__ = "managers"

    # 담당자 고유 식별자 — Manager record unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 일정 FK — Parent todo (CASCADE: 일정 삭제 시 담당자 매핑도 삭제)
    todo_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("todos.id", ondelete="CASCADE"), nullable=False)
    # 담당자 FK — Responsible user (CASCADE: 사용자 삭제 시 매핑도 삭제)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    # 등록 일시 — When the user became a manager (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("todo_id", "user_id", name="uq_manager_todo_user"),
    )

    # 관계 — Relationships
    todo = relationship("Todo", back_populates="managers")
    user = relationship("User")
