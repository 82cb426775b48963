"""애플리케이션 테스트 — 헬스 체크, 요청 로깅 미들웨어.

Application tests — Health check and the request logging middleware.
"""

from httpx import AsyncClient
from structlog.testing import capture_logs


async def test_health(client: AsyncClient):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


async def test_request_id_is_echoed(client: AsyncClient):
    res = await client.post(
        "/api/v1/auth/signin",
        json={"email": "ghost@test.com", "password": "x"},
        headers={"X-Request-ID": "req-123"},
    )
    assert res.headers["x-request-id"] == "req-123"


async def test_request_id_is_generated(client: AsyncClient):
    res = await client.get("/api/v1/todos/search")
    assert len(res.headers["x-request-id"]) == 32


async def test_request_log_masks_password(client: AsyncClient, owner):
    with capture_logs() as logs:
        await client.post("/api/v1/auth/signin", json={
            "email": "owner@test.com",
            "password": "Password1",
        })

    requests = [e for e in logs if e["event"] == "http_request"]
    assert len(requests) == 1
    assert requests[0]["status_code"] == 200
    assert requests[0]["request_body"] == {"email": "owner@test.com", "password": "***"}
