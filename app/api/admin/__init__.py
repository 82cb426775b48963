"""관리자 API 라우터 패키지 — 모든 관리자 엔드포인트 통합.

Admin API Router package — Aggregates admin-only endpoints.
Every route requires the ADMIN role and is access-logged before it runs.

Included routers:
    - users: 사용자 역할 변경 (User role change)
"""

from fastapi import APIRouter, Depends

from app.api.admin.users import router as users_router
from app.api.deps import log_admin_access

admin_router: APIRouter = APIRouter(dependencies=[Depends(log_admin_access)])

admin_router.include_router(users_router, prefix="/users", tags=["Admin Users"])
