"""전역 예외 핸들러 — 모든 오류 응답의 형식을 통일.

Global exception handlers. Every error leaves the API as a JSON body with
a ``detail`` message; request validation errors also list the offending
fields, and unexpected failures are logged without leaking their cause.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE: str = "Internal Server Error. Please try again later."


def _serialize_validation_error(error: dict[str, Any]) -> dict[str, Any]:
    # "body" 접두사 제거 — Drop the request-part prefix from the location
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    return {
        "property": ".".join(loc),
        "message": error.get("msg", ""),
        "value": error.get("input"),
    }


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 오류를 400 응답으로 변환합니다.

    Convert request validation errors to a 400 with one entry per field.
    """
    errors = [_serialize_validation_error(error) for error in exc.errors()]
    logger.info("Invalid data on %s %s: %d error(s)", request.method, request.url.path, len(errors))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"detail": "Invalid data", "validation_errors": errors}),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTP 예외를 {"detail": ...} 응답으로 변환합니다.

    5xx errors are logged with their cause and answered with a generic message.
    """
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Server error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse(status_code=exc.status_code, content={"detail": INTERNAL_ERROR_MESSAGE})
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """처리되지 않은 예외 — 스택 트레이스를 기록하고 500 반환."""
    logger.exception("Unexpected error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """앱에 전역 예외 핸들러를 등록합니다."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
