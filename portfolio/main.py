"""FastAPI 애플리케이션 엔트리포인트 — 로깅, 미들웨어, 예외 핸들러, 라우터 등록.

FastAPI application entry point.
Configures logging, middleware, global exception handlers, the health
check, and the dashboard and public view routers.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio.config import settings
from portfolio.exceptions import register_exception_handlers
from portfolio.middleware.axiom_logging import AxiomLoggingMiddleware

# 로깅 설정 — Root logger configuration
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Axiom API 로깅 미들웨어 — Axiom API request/response logging
# CORS보다 먼저 등록하여 모든 요청을 캡처 (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# 라우터 등록 — Router registration
# view_router의 /{lsi} 경로가 모든 단일 세그먼트를 잡으므로 반드시 마지막에 등록
# view_router's /{lsi} matches any single segment, so it is registered last
# ---------------------------------------------------------------------------
from portfolio.api.dashboard import dashboard_router  # noqa: E402
from portfolio.api.view import router as view_router  # noqa: E402

app.include_router(dashboard_router, prefix="/dashboard")
app.include_router(view_router, tags=["View"])

