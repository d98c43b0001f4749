"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per API request to Axiom: method, path,
params, request body, status code, duration and error reason.
Sensitive fields (password, token, secret) are masked before sending.
Public profile views are tagged with the owner's username and whether the
visit came through a full LSI.
"""

import asyncio
import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from portfolio.config import settings
from portfolio.utils.lsi import is_full_lsi, username_from_lsi

logger = logging.getLogger(__name__)

# 마스킹 대상 필드 패턴 — Fields to mask in request bodies and params
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json", "/favicon.ico"}

_DASHBOARD_PREFIX = "/dashboard/"
_MAX_ERROR_LEN = 500


def _mask_dict(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else _mask_dict(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask_dict(item, depth + 1) for item in data[:20]]
    return data


def _profile_view_fields(path: str) -> dict[str, Any]:
    """GET /{lsi} 요청이면 소유자 아이디와 LSI 사용 여부를 반환합니다."""
    segments = [s for s in path.split("/") if s]
    if len(segments) != 1 or path.startswith(_DASHBOARD_PREFIX):
        return {}
    lsi = segments[0]
    return {"profile_username": username_from_lsi(lsi), "full_lsi": is_full_lsi(lsi)}


async def _read_json_body(request: Request) -> Any:
    body_bytes = await request.body()
    if not body_bytes:
        return None
    try:
        return _mask_dict(json.loads(body_bytes))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(non-json body)"


def _error_detail(body: bytes) -> str:
    try:
        data = json.loads(body)
        detail = data.get("detail", str(data)) if isinstance(data, dict) else str(data)
    except (json.JSONDecodeError, UnicodeDecodeError):
        detail = body.decode("utf-8", errors="replace")
    detail = str(detail)
    return detail[:_MAX_ERROR_LEN] + "..." if len(detail) > _MAX_ERROR_LEN else detail


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs API requests and responses to Axiom.
    Passes requests through untouched when AXIOM_API_TOKEN or
    AXIOM_DATASET is not configured.
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
        if request.url.path in _SKIP_PATHS or self._client is None:
            return await call_next(request)

        start_time = time.time()
        method = request.method
        path = request.url.path

        log_event: dict[str, Any] = {"method": method, "path": path}
        log_event.update(_profile_view_fields(path))
        if request.query_params:
            log_event["query_params"] = _mask_dict(dict(request.query_params))
        if method in ("POST", "PUT", "PATCH"):
            request_body = await _read_json_body(request)
            if request_body is not None:
                log_event["request_body"] = request_body

        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 body에서 사유 추출 후 재구성 — Read the error body, then rebuild the response
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                log_event["error"] = _error_detail(resp_body)
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            log_event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            log_event["status_code"] = status_code
            log_event["duration_ms"] = round((time.time() - start_time) * 1000, 2)
            try:
                # axiom-py는 동기 클라이언트 — The axiom-py client is blocking
                await asyncio.to_thread(self._client.ingest_events, self._dataset, [log_event])
            except Exception:
                # 로깅 실패는 요청에 영향 없음 — Never fail a request on log delivery
                logger.warning("Failed to send request log to Axiom", exc_info=True)

        return response
