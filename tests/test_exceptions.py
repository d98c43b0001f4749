"""전역 예외 핸들러 테스트.

Global exception handler tests — Unexpected failures and 5xx HTTP errors
are answered with a generic message and logged with their cause; client
errors keep their detail and headers.
"""

import logging
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from portfolio.exceptions import INTERNAL_ERROR_MESSAGE, register_exception_handlers
from portfolio.utils.exceptions import NotFoundError, UnauthorizedError, UnexpectedError


def _build_app() -> FastAPI:
    failing_app = FastAPI()
    register_exception_handlers(failing_app)

    @failing_app.get("/crash")
    async def crash():
        raise RuntimeError("db password is hunter2")

    @failing_app.get("/wrapped")
    async def wrapped():
        try:
            raise ValueError("smtp relay refused")
        except ValueError as e:
            raise UnexpectedError("Unexpected error while sending mail", "Mailer.send") from e

    @failing_app.get("/missing")
    async def missing():
        raise NotFoundError("Widget")

    @failing_app.get("/private")
    async def private():
        raise UnauthorizedError("Invalid or expired token")

    @failing_app.get("/items/{item_id}")
    async def item(item_id: int):
        return {"item_id": item_id}

    return failing_app


@pytest_asyncio.fixture
async def failing_client() -> AsyncGenerator[AsyncClient, None]:
    # 500 응답을 받기 위해 앱 예외를 다시 던지지 않음 — Return the 500 response instead of re-raising
    transport = ASGITransport(app=_build_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestUnhandledException:
    """처리되지 않은 예외 테스트."""

    async def test_generic_500(self, failing_client: AsyncClient):
        """알 수 없는 예외는 일반 메시지의 500."""
        res = await failing_client.get("/crash")
        assert res.status_code == 500
        assert res.json() == {"detail": INTERNAL_ERROR_MESSAGE}
        assert INTERNAL_ERROR_MESSAGE == "Internal Server Error. Please try again later."

    async def test_cause_not_leaked(self, failing_client: AsyncClient):
        """예외 메시지는 응답에 포함되지 않음."""
        res = await failing_client.get("/crash")
        assert "hunter2" not in res.text
        assert "RuntimeError" not in res.text

    async def test_cause_is_logged(self, failing_client: AsyncClient, caplog: pytest.LogCaptureFixture):
        """원인은 로그에 스택 트레이스와 함께 기록."""
        caplog.set_level(logging.ERROR, logger="portfolio.exceptions")
        await failing_client.get("/crash")
        records = [r for r in caplog.records if r.name == "portfolio.exceptions"]
        assert records
        assert "hunter2" in records[0].getMessage()
        assert records[0].exc_info is not None


class TestServerHttpException:
    """5xx HTTPException 테스트."""

    async def test_unexpected_error_is_masked(self, failing_client: AsyncClient):
        """UnexpectedError의 내부 메시지는 숨기고 일반 메시지 반환."""
        res = await failing_client.get("/wrapped")
        assert res.status_code == 500
        assert res.json() == {"detail": INTERNAL_ERROR_MESSAGE}
        assert "smtp relay refused" not in res.text
        assert "Mailer.send" not in res.text

    async def test_unexpected_error_origin_is_logged(
        self, failing_client: AsyncClient, caplog: pytest.LogCaptureFixture
    ):
        """로그에는 발생 위치와 원인이 남음."""
        caplog.set_level(logging.ERROR, logger="portfolio.exceptions")
        await failing_client.get("/wrapped")
        messages = [r.getMessage() for r in caplog.records if r.name == "portfolio.exceptions"]
        assert any("Mailer.send" in m and "smtp relay refused" in m for m in messages)


class TestClientErrors:
    """4xx 응답 형식 테스트."""

    async def test_not_found_detail(self, failing_client: AsyncClient):
        """4xx는 detail 그대로 전달."""
        res = await failing_client.get("/missing")
        assert res.status_code == 404
        assert res.json() == {"detail": "Widget not found."}

    async def test_unauthorized_keeps_headers(self, failing_client: AsyncClient):
        """401은 WWW-Authenticate 헤더 유지."""
        res = await failing_client.get("/private")
        assert res.status_code == 401
        assert res.headers["www-authenticate"] == "Bearer"

    async def test_unknown_route(self, failing_client: AsyncClient):
        """없는 경로는 {"detail": "Not Found"}."""
        res = await failing_client.get("/nowhere")
        assert res.status_code == 404
        assert res.json() == {"detail": "Not Found"}

    async def test_path_validation_error(self, failing_client: AsyncClient):
        """경로 파라미터 검증 오류는 400과 필드 목록."""
        res = await failing_client.get("/items/abc")
        assert res.status_code == 400
        body = res.json()
        assert body["detail"] == "Invalid data"
        assert body["validation_errors"][0]["property"] == "item_id"
        assert body["validation_errors"][0]["value"] == "abc"
