"""앱 API 라우터 패키지 — 모든 사용자용 엔드포인트 통합.

App API Router package — Aggregates all user-facing endpoints
into a single router for inclusion in the FastAPI application.

Included routers:
    - auth: 회원가입/로그인 (Signup and signin)
    - users: 사용자 조회, 비밀번호 변경 (User lookup, password change)
    - todos: 일정 (Todos: create, filtered list, search, lookup)
    - comments: 일정 댓글 (Comments under /todos/{todo_id})
    - managers: 일정 담당자 (Managers under /todos/{todo_id})
"""

from fastapi import APIRouter

from app.api.auth import router as auth_router
from app.api.app.users import router as users_router
from app.api.app.todos import router as todos_router
from app.api.app.comments import router as comments_router
from app.api.app.managers import router as managers_router

app_router: APIRouter = APIRouter()

app_router.include_router(auth_router, prefix="/auth", tags=["Auth"])
app_router.include_router(users_router, prefix="/users", tags=["Users"])
app_router.include_router(todos_router, prefix="/todos", tags=["Todos"])
# 댓글/담당자: /todos/{todo_id}/comments, /todos/{todo_id}/managers (nested under todos)
app_router.include_router(comments_router, tags=["Comments"])
app_router.include_router(managers_router, tags=["Managers"])
