"""사용자 API 테스트 — 조회, 비밀번호 변경.

User API tests — Lookup and password change.
"""

import uuid

import pytest
from httpx import AsyncClient

from tests.conftest import auth_header

USERS = "/api/v1/users"
AUTH = "/api/v1/auth"


class TestGetUser:
    """사용자 조회 테스트."""

    async def test_get_user(self, client: AsyncClient, owner, other_token):
        res = await client.get(f"{USERS}/{owner.id}", headers=auth_header(other_token))
        assert res.status_code == 200
        assert res.json() == {"id": str(owner.id), "email": "owner@test.com", "nickname": "owner"}

    async def test_get_user_not_found(self, client: AsyncClient, owner_token):
        res = await client.get(f"{USERS}/{uuid.uuid4()}", headers=auth_header(owner_token))
        assert res.status_code == 404


class TestChangePassword:
    """비밀번호 변경 테스트."""

    async def test_change_password(self, client: AsyncClient, owner_token):
        res = await client.put(f"{USERS}/password", json={
            "old_password": "Password1",
            "new_password": "NewPassword2",
        }, headers=auth_header(owner_token))
        assert res.status_code == 200

        old = await client.post(f"{AUTH}/signin", json={"email": "owner@test.com", "password": "Password1"})
        new = await client.post(f"{AUTH}/signin", json={"email": "owner@test.com", "password": "NewPassword2"})
        assert old.status_code == 401
        assert new.status_code == 200

    @pytest.mark.parametrize(
        "new_password",
        ["Short1", "nouppercase1", "NoDigitsHere"],
    )
    async def test_weak_new_password(self, client: AsyncClient, owner_token, new_password):
        res = await client.put(f"{USERS}/password", json={
            "old_password": "Password1",
            "new_password": new_password,
        }, headers=auth_header(owner_token))
        assert res.status_code == 400

    async def test_same_as_old(self, client: AsyncClient, owner_token):
        res = await client.put(f"{USERS}/password", json={
            "old_password": "Password1",
            "new_password": "Password1",
        }, headers=auth_header(owner_token))
        assert res.status_code == 400

    async def test_wrong_old_password(self, client: AsyncClient, owner_token):
        res = await client.put(f"{USERS}/password", json={
            "old_password": "Wrong1234",
            "new_password": "NewPassword2",
        }, headers=auth_header(owner_token))
        assert res.status_code == 400
