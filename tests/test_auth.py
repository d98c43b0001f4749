"""대시보드 인증 API 테스트 — 회원가입 및 로그인.

Dashboard auth API tests — Registration and login, including validation
error formatting and bearer token checks.
"""

from datetime import datetime, timedelta, timezone

import jwt
from httpx import AsyncClient

from portfolio.config import settings
from portfolio.services.user_profile_service import user_profile_service
from portfolio.utils.jwt import decode_token
from tests.conftest import auth_header

PROFILE = "/dashboard/profile"

NEW_USER = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "username": "ada.l",
    "email": "Ada@Example.com",
    "password": "analytical1",
}


class TestRegister:
    """회원가입 테스트."""

    async def test_register_success(self, client: AsyncClient):
        """회원가입 성공 — 201과 생성 ID 반환."""
        res = await client.post(f"{PROFILE}/register", json=NEW_USER)
        assert res.status_code == 201
        body = res.json()
        assert body["message"] == "User successfully registered"
        assert body["data"]["inserted_id"]
        assert body["data"]["registration_date"]

    async def test_register_stores_lowercase_email(self, client: AsyncClient):
        """이메일은 소문자로 저장되어 대소문자 무관 로그인 가능."""
        await client.post(f"{PROFILE}/register", json=NEW_USER)
        res = await client.post(f"{PROFILE}/login", json={
            "email": "ada@example.com",
            "password": "analytical1",
        })
        assert res.status_code == 200

    async def test_register_email_taken(self, client: AsyncClient, owner):
        """이메일 중복 시 400 (대소문자 무시)."""
        res = await client.post(f"{PROFILE}/register", json={
            **NEW_USER, "email": "JANE@example.com",
        })
        assert res.status_code == 400
        assert res.json()["detail"] == "Email taken. Kindly try with a different email address"

    async def test_register_username_taken(self, client: AsyncClient, owner):
        """아이디 중복 시 400."""
        res = await client.post(f"{PROFILE}/register", json={
            **NEW_USER, "username": "jdoe",
        })
        assert res.status_code == 400
        assert res.json()["detail"] == "Username taken. Kindly try with a different username"

    async def test_register_username_with_separator_rejected(self, client: AsyncClient):
        """"-" 가 들어간 아이디는 검증 오류."""
        res = await client.post(f"{PROFILE}/register", json={
            **NEW_USER, "username": "ada-l",
        })
        assert res.status_code == 400
        body = res.json()
        assert body["detail"] == "Invalid data"
        errors = {e["property"]: e for e in body["validation_errors"]}
        assert "username" in errors
        assert errors["username"]["value"] == "ada-l"

    async def test_register_short_password(self, client: AsyncClient):
        """8자 미만 비밀번호는 검증 오류."""
        res = await client.post(f"{PROFILE}/register", json={
            **NEW_USER, "password": "short",
        })
        assert res.status_code == 400
        properties = [e["property"] for e in res.json()["validation_errors"]]
        assert "password" in properties

    async def test_register_missing_fields(self, client: AsyncClient):
        """필수 필드 누락 시 필드별 오류."""
        res = await client.post(f"{PROFILE}/register", json={"username": "ada"})
        assert res.status_code == 400
        properties = {e["property"] for e in res.json()["validation_errors"]}
        assert {"first_name", "last_name", "email", "password"} <= properties

    async def test_register_email_race_is_bad_request(self, client: AsyncClient, monkeypatch, owner):
        """사전 확인 이후 커밋된 같은 이메일 — UNIQUE 위반도 400."""
        async def _not_taken(*_args, **_kwargs):
            return False

        monkeypatch.setattr(user_profile_service, "user_profile_exists", _not_taken)
        res = await client.post(f"{PROFILE}/register", json={
            **NEW_USER, "email": "jane@example.com",
        })
        assert res.status_code == 400
        assert res.json()["detail"] == "Email taken. Kindly try with a different email address"

    async def test_register_username_race_is_bad_request(self, client: AsyncClient, monkeypatch, owner):
        """사전 확인 이후 커밋된 같은 아이디 — UNIQUE 위반도 400."""
        async def _not_taken(*_args, **_kwargs):
            return False

        monkeypatch.setattr(user_profile_service, "user_profile_exists", _not_taken)
        res = await client.post(f"{PROFILE}/register", json={
            **NEW_USER, "username": "jdoe",
        })
        assert res.status_code == 400
        assert res.json()["detail"] == "Username taken. Kindly try with a different username"

        # 롤백 후 다음 가입은 정상 처리 — The next registration still succeeds
        res = await client.post(f"{PROFILE}/register", json=NEW_USER)
        assert res.status_code == 201


class TestLogin:
    """로그인 테스트."""

    async def test_login_success(self, client: AsyncClient, owner):
        """로그인 성공 — 토큰과 아이디 반환."""
        res = await client.post(f"{PROFILE}/login", json={
            "email": "jane@example.com",
            "password": "portfolio123!",
        })
        assert res.status_code == 200
        body = res.json()
        assert body["message"] == "Login successful"
        assert body["data"]["username"] == "jdoe"
        payload = decode_token(body["data"]["token"])
        assert payload["sub"] == str(owner.id)
        assert payload["type"] == "access"

    async def test_login_unknown_email(self, client: AsyncClient, owner):
        """존재하지 않는 이메일."""
        res = await client.post(f"{PROFILE}/login", json={
            "email": "nobody@example.com",
            "password": "portfolio123!",
        })
        assert res.status_code == 400
        assert res.json()["detail"] == "Incorrect email"

    async def test_login_wrong_password(self, client: AsyncClient, owner):
        """잘못된 비밀번호."""
        res = await client.post(f"{PROFILE}/login", json={
            "email": "jane@example.com",
            "password": "wrong-password",
        })
        assert res.status_code == 400
        assert res.json()["detail"] == "Incorrect password"


class TestBearerAuth:
    """Bearer 토큰 인증 테스트."""

    async def test_missing_token(self, client: AsyncClient, owner):
        """토큰 없이 보호된 엔드포인트 접근 시 401."""
        res = await client.get(f"{PROFILE}/links")
        assert res.status_code == 401
        assert res.json()["detail"] == "Invalid or expired token"

    async def test_garbage_token(self, client: AsyncClient, owner):
        """잘못된 토큰은 401."""
        res = await client.get(f"{PROFILE}/links", headers=auth_header("not-a-jwt"))
        assert res.status_code == 401

    async def test_login_token_is_accepted(self, client: AsyncClient, owner):
        """로그인으로 받은 토큰으로 보호된 엔드포인트 접근."""
        login = await client.post(f"{PROFILE}/login", json={
            "email": "jane@example.com",
            "password": "portfolio123!",
        })
        token = login.json()["data"]["token"]
        res = await client.get(f"{PROFILE}/links", headers=auth_header(token))
        assert res.status_code == 200

    async def test_non_access_token_rejected(self, client: AsyncClient, owner):
        """access 가 아닌 유형의 토큰은 401."""
        token = jwt.encode(
            {
                "sub": str(owner.id),
                "email": owner.email,
                "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
                "type": "refresh",
            },
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
        res = await client.get(f"{PROFILE}/links", headers=auth_header(token))
        assert res.status_code == 401
        assert res.json()["detail"] == "Invalid or expired token"

    async def test_expired_token_rejected(self, client: AsyncClient, owner):
        """만료된 액세스 토큰은 401."""
        token = jwt.encode(
            {
                "sub": str(owner.id),
                "email": owner.email,
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
                "type": "access",
            },
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
        res = await client.get(f"{PROFILE}/links", headers=auth_header(token))
        assert res.status_code == 401
        assert res.json()["detail"] == "Invalid or expired token"
