"""댓글 SQLAlchemy ORM 모델 정의.

Comment SQLAlchemy ORM model definition.

Tables:
    - comments: 일정 댓글 (Comments written by users on todos)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import DateTime, Text, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Comment(Base):
    """댓글 모델 — 일정에 작성된 댓글.

    Comment model. Always references one existing author and one existing todo.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        contents: 댓글 내용 (Comment body)
        user_id: 작성자 FK (Author foreign key)
        todo_id: 일정 FK (Parent todo foreign key)
        created_at: 생성 일시 UTC (Creation timestamp)
        modified_at: 수정 일시 UTC (Last modification timestamp)
    """

    __tablename__ = "comments"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 댓글 내용 — Comment body text
    contents: Mapped[str] = mapped_column(Text, nullable=False)
    # 작성자 FK — Author (CASCADE: 사용자 삭제 시 댓글도 삭제)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    # 일정 FK — Parent todo (CASCADE: 일정 삭제 시 댓글도 삭제)
    todo_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("todos.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    modified_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    user = relationship("User")
    todo = relationship("Todo", back_populates="comments")
