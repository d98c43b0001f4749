"""대시보드 프로필 라우터 — 회원가입, 로그인, LSI 생성, 프로젝트 추가.

Dashboard Profile Router — Registration, login, LSI creation and
project management for portfolio owners.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.deps import get_current_user
from portfolio.database import get_db
from portfolio.models.user import User
from portfolio.schemas.auth import (
    LoginEnvelope,
    LoginRequest,
    RegisterEnvelope,
    RegisterRequest,
)
from portfolio.schemas.lsi import (
    CreateLsiRequest,
    CreateLsiResponse,
    LsiRecordListEnvelope,
)
from portfolio.schemas.profile import ProjectCreate, ProjectEnvelope
from portfolio.services.lsi_service import lsi_service
from portfolio.services.project_service import project_service
from portfolio.services.user_profile_service import user_profile_service

router: APIRouter = APIRouter()


@router.post("/register", response_model=RegisterEnvelope, status_code=status.HTTP_201_CREATED)
async def register(
    data: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RegisterEnvelope:
    """회원가입 — 새 포트폴리오 소유자 등록.

    Register a new portfolio owner.
    """
    result = await user_profile_service.register(db, data)
    await db.commit()
    return RegisterEnvelope(data=result)


@router.post("/login", response_model=LoginEnvelope)
async def login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> LoginEnvelope:
    """로그인 — 이메일/비밀번호로 JWT 발급.

    Log in with email and password and receive an access token.
    """
    result = await user_profile_service.login(db, data)
    return LoginEnvelope(data=result)


@router.post("/link/create", response_model=CreateLsiResponse, status_code=status.HTTP_201_CREATED)
async def create_link(
    data: CreateLsiRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CreateLsiResponse:
    """LSI 생성 — 소셜 플랫폼용 추적 링크 발급.

    Generate a Link Source Identifier for a social platform.
    """
    lsi: str = await lsi_service.create_link_source_identifier(
        db, data.username, data.social_media_platform
    )
    await db.commit()
    return CreateLsiResponse(link=lsi)


@router.get("/links", response_model=LsiRecordListEnvelope)
async def list_links(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> LsiRecordListEnvelope:
    """내 LSI 목록과 방문자 수 조회."""
    records = await lsi_service.list_lsi_records(db, current_user)
    return LsiRecordListEnvelope(data=records)


@router.post("/projects", response_model=ProjectEnvelope, status_code=status.HTTP_201_CREATED)
async def add_project(
    data: ProjectCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> ProjectEnvelope:
    """프로젝트 추가 — 내 포트폴리오에 프로젝트 등록.

    Add a project to the authenticated owner's portfolio.
    """
    result = await project_service.add_project(db, current_user, data)
    await db.commit()
    return ProjectEnvelope(data=result)
