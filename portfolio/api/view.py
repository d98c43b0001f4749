"""뷰 라우터 — 포트폴리오 프론트엔드용 공개 엔드포인트.

View Router — Public endpoints consumed by the portfolio frontend.
Registered last because both paths are catch-alls.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.database import get_db
from portfolio.events.profile_events import FULL_LSI_USED, profile_events
from portfolio.schemas.profile import ProfileEnvelope, ProjectDetailEnvelope
from portfolio.services.view_service import view_service
from portfolio.utils.lsi import is_full_lsi, username_from_lsi

router: APIRouter = APIRouter()


@router.get("/{lsi}", response_model=ProfileEnvelope)
async def view_home_page(
    lsi: str,
    background_tasks: BackgroundTasks,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProfileEnvelope:
    """홈 페이지 프로필 조회.

    Serve the owner's home page profile. The path value is either a bare
    username or a full LSI; a full LSI also counts a visit once the
    response has been sent.
    """
    username: str = username_from_lsi(lsi)
    profile = await view_service.get_home_page_profile(db, username)

    if is_full_lsi(lsi):
        # 응답 후 방문자 수 갱신 — Count the visit after the response is sent
        background_tasks.add_task(profile_events.emit, FULL_LSI_USED, profile.email, username, lsi)

    return ProfileEnvelope(data=profile)


@router.get("/{project_name}/{project_detail_id}", response_model=ProjectDetailEnvelope)
async def view_project_detail_page(
    project_name: str,
    project_detail_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProjectDetailEnvelope:
    """프로젝트 상세 페이지 조회."""
    detail = await view_service.get_project_detail_by(db, project_name, project_detail_id)
    return ProjectDetailEnvelope(data=detail)
