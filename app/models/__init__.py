"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for relationship resolution and
schema creation.

Modules:
    user: 사용자 및 역할 태그 (User and UserRole)
    todo: 일정 및 담당자 (Todo and Manager)
    comment: 댓글 (Comments on todos)
    log: 요청 로그 (Independent-transaction audit log)
"""

from app.models.user import User, UserRole
from app.models.todo import Todo, Manager
from app.models.comment import Comment
from app.models.log import Log

__all__ = [
    "User", "UserRole",
    "Todo", "Manager",
    "Comment",
    "Log",
]
