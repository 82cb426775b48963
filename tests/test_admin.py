"""관리자 API 테스트 — 역할 변경, 접근 제어, 접근 로그.

Admin API tests — Role change, ADMIN-only access and access logging.
"""

import uuid

from httpx import AsyncClient
from structlog.testing import capture_logs

from app.utils.jwt import decode_token
from tests.conftest import auth_header

ADMIN_USERS = "/api/v1/admin/users"


class TestChangeRole:
    """역할 변경 테스트."""

    async def test_promote_user(self, client: AsyncClient, other_user, admin_token):
        res = await client.patch(
            f"{ADMIN_USERS}/{other_user.id}",
            json={"role": "admin"},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 200

        signin = await client.post("/api/v1/auth/signin", json={
            "email": "other@test.com",
            "password": "Password1",
        })
        assert decode_token(signin.json()["access_token"])["role"] == "ADMIN"

    async def test_invalid_role(self, client: AsyncClient, other_user, admin_token):
        res = await client.patch(
            f"{ADMIN_USERS}/{other_user.id}",
            json={"role": "ROOT"},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 400

    async def test_missing_user(self, client: AsyncClient, admin_token):
        res = await client.patch(
            f"{ADMIN_USERS}/{uuid.uuid4()}",
            json={"role": "USER"},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 404


class TestAdminAccess:
    """관리자 접근 제어 및 로그 테스트."""

    async def test_non_admin_forbidden(self, client: AsyncClient, owner, other_token):
        res = await client.patch(
            f"{ADMIN_USERS}/{owner.id}",
            json={"role": "ADMIN"},
            headers=auth_header(other_token),
        )
        assert res.status_code == 403

    async def test_unauthenticated(self, client: AsyncClient, owner):
        res = await client.patch(f"{ADMIN_USERS}/{owner.id}", json={"role": "ADMIN"})
        assert res.status_code in (401, 403)

    async def test_access_is_logged_before_handler(self, client: AsyncClient, admin_user, admin_token):
        """핸들러가 실패해도 접근 로그는 남음."""
        missing = uuid.uuid4()
        with capture_logs() as logs:
            res = await client.patch(
                f"{ADMIN_USERS}/{missing}",
                json={"role": "USER"},
                headers=auth_header(admin_token),
            )
        assert res.status_code == 404

        access = [e for e in logs if e["event"] == "admin_api_access"]
        assert len(access) == 1
        assert access[0]["user_id"] == str(admin_user.id)
        assert access[0]["method"] == "PATCH"
        assert str(missing) in access[0]["url"]
