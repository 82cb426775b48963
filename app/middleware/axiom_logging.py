"""요청 로깅 미들웨어 — structlog 요청 로그 및 Axiom 전송.

Request logging middleware.
Every request gets a request_id bound into structlog context vars and one
"http_request" event once the response status is known. When Axiom is
configured the same event is also ingested there. Sensitive fields
(password, token, secret) are masked before anything leaves the process.
"""

import json
import re
import time
import uuid
from typing import Any

import structlog
from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

logger = structlog.get_logger(__name__)

# 마스킹 대상 필드 패턴 — Fields to mask in request bodies and query strings
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MAX_DETAIL_LEN = 500


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive keys in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


async def _read_json_body(request: Request) -> Any:
    """요청 본문을 JSON으로 읽어 마스킹합니다 (None if empty)."""
    body_bytes: bytes = await request.body()
    if not body_bytes:
        return None
    try:
        return mask_sensitive(json.loads(body_bytes))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(non-json body)"


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청을 로깅하고, 설정 시 Axiom에도 전송하는 미들웨어.

    Logs method, path, masked params/body, status code and duration.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        request_id: str = request.headers.get("x-request-id") or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.perf_counter()
        method = request.method

        request_body: Any = None
        if method in ("POST", "PUT", "PATCH"):
            request_body = await _read_json_body(request)

        status_code: int = 500
        error_detail: str | None = None
        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:_MAX_DETAIL_LEN]}"
            raise
        finally:
            event: dict[str, Any] = {
                "method": method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
                "request_id": request_id,
            }
            if request.query_params:
                event["query_params"] = mask_sensitive(dict(request.query_params))
            if request_body is not None:
                event["request_body"] = request_body
            if error_detail:
                event["error"] = error_detail

            self._emit(event)

        response.headers["X-Request-ID"] = request_id
        return response

    def _emit(self, event: dict[str, Any]) -> None:
        """로그 이벤트를 structlog과 Axiom으로 내보냅니다."""
        log_fields = {k: v for k, v in event.items() if k != "request_id"}
        if event["status_code"] >= 500:
            logger.error("http_request", **log_fields)
        elif event["status_code"] >= 400:
            logger.warning("http_request", **log_fields)
        else:
            logger.info("http_request", **log_fields)

        if self._client is None:
            return
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            # Axiom 전송 실패는 요청 처리에 영향 없음 (ingest failure never fails the request)
            logger.warning("axiom_ingest_failed", exc_info=True)
