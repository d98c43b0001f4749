"""프로필 및 프로젝트 Pydantic 요청/응답 스키마 정의.

Profile and project Pydantic request/response schema definitions.
Covers the public portfolio payloads and dashboard project creation.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from portfolio.models.project import DEMO_TYPES, PROJECT_STATUSES

# 데모 유형 / 프로젝트 상태 패턴 — Patterns built from the model choices
DEMO_TYPE_PATTERN: str = rf"^({'|'.join(DEMO_TYPES)})$"
PROJECT_STATUS_PATTERN: str = rf"^({'|'.join(PROJECT_STATUSES)})$"


class ProjectResponse(BaseModel):
    """프로젝트 응답 스키마.

    Portfolio project as shown on the owner's home page.
    """

    id: str
    name: str
    title: str
    description: str
    demo: str | None = None
    demo_type: str | None = None
    link: str | None = None
    technologies: list[str] = []
    status: str
    started_on: datetime
    first_push: datetime | None = None
    last_push: datetime | None = None
    deployment_date: datetime | None = None
    details_id: str | None = None


class ProfileResponse(BaseModel):
    """공개 프로필 응답 스키마.

    Public profile payload. Never carries the password hash or LSI records.
    """

    id: str
    first_name: str
    last_name: str
    other_names: list[str] = []
    username: str
    email: str
    title: list[str] = []
    resume: str | None = None
    headline_photo: str | None = None
    about: str | None = None
    skills: list[dict[str, Any]] = []
    projects: list[ProjectResponse] = []
    education: list[dict[str, Any]] = []
    contact_info: dict[str, str] = {}
    logo: dict[str, str] = {}
    created_at: datetime
    updated_at: datetime


class ProfileEnvelope(BaseModel):
    """프로필 응답 래퍼 — GET /{lsi} 응답 본문."""

    status: str = "success"
    data: ProfileResponse


class ProjectDetailResponse(BaseModel):
    """프로젝트 상세 응답 스키마."""

    id: str
    project_id: str | None = None
    name: str
    why: list[dict[str, Any]] = []
    how: list[dict[str, Any]] = []


class ProjectDetailEnvelope(BaseModel):
    """프로젝트 상세 응답 래퍼."""

    status: str = "success"
    data: ProjectDetailResponse


class ProjectCreate(BaseModel):
    """프로젝트 추가 요청 스키마.

    Dashboard request to add a project to the authenticated owner's profile.

    Attributes:
        name: 프로젝트 이름 (Short name, unique per owner, used in detail URLs)
        title: 표시 제목 (Display title)
        description: 설명 (Description)
        status: 진행 상태 (planned | in progress | completed | on hold | archived)
        started_on: 시작일, 생략 시 현재 시각 (Start date, defaults to now)
        details_id: 연결할 프로젝트 상세 UUID (Existing project detail to link)
    """

    name: str = Field(..., min_length=1, max_length=100)
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    demo: str | None = None
    demo_type: str | None = Field(None, pattern=DEMO_TYPE_PATTERN)
    link: str | None = None
    technologies: list[str] | None = None
    status: str = Field("planned", pattern=PROJECT_STATUS_PATTERN)
    started_on: datetime | None = None
    first_push: datetime | None = None
    last_push: datetime | None = None
    deployment_date: datetime | None = None
    details_id: UUID | None = None


class ProjectEnvelope(BaseModel):
    """프로젝트 응답 래퍼."""

    status: str = "success"
    data: ProjectResponse
