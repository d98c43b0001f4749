"""대시보드 API 라우터 패키지 — 소유자용 엔드포인트 통합.

Dashboard API Router package — Aggregates the owner-facing endpoints
into a single router mounted under /dashboard.

Included routers:
    - profile: 회원가입, 로그인, LSI, 프로젝트 (Registration, login, LSIs, projects)
"""

from fastapi import APIRouter

from portfolio.api.dashboard.profile import router as profile_router

dashboard_router: APIRouter = APIRouter()

dashboard_router.include_router(profile_router, prefix="/profile", tags=["Dashboard Profile"])
