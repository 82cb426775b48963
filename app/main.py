"""FastAPI 애플리케이션 엔트리포인트 — 로깅, 수명주기, 미들웨어, 라우터 등록.

FastAPI application entry point. Configures structlog, creates missing
tables on startup, installs request logging and CORS, and mounts the
user-facing and admin routers under /api/v1.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import dispose_db, init_db
from app.logging_config import setup_logging
from app.middleware.axiom_logging import AxiomLoggingMiddleware

setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """시작 시 스키마 준비, 종료 시 커넥션 풀 정리 (Startup and shutdown hooks)."""
    if settings.DB_CREATE_TABLES:
        await init_db()
    logger.info("app_started", app_name=settings.APP_NAME)
    yield
    await dispose_db()


app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# 요청 로깅 미들웨어 — structlog + optional Axiom ingest
# CORS보다 먼저 등록하여 모든 요청을 캡처 (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 (Liveness probe for load balancers)."""
    return {"status": "ok"}


# app_router: 인증, 사용자, 일정, 댓글, 담당자 (Auth, users, todos, comments, managers)
# admin_router: 관리자 전용, 접근 로그 기록 (Admin only, access-logged)
from app.api.admin import admin_router  # noqa: E402
from app.api.app import app_router  # noqa: E402

app.include_router(app_router, prefix="/api/v1")
app.include_router(admin_router, prefix="/api/v1/admin")
