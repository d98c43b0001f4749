"""프로젝트 및 프로젝트 상세 SQLAlchemy ORM 모델 정의.

Project and project detail SQLAlchemy ORM model definitions.

Tables:
    - project_details: 프로젝트 상세 페이지 본문 (Long-form project write-ups)
    - projects: 사용자 포트폴리오 프로젝트 (Portfolio project entries per user)
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, String, Text, DateTime, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio.database import Base

# 데모 유형 — Demo media types
DEMO_TYPES: tuple[str, ...] = ("image", "video", "gif", "link")
# 프로젝트 상태 — Project lifecycle statuses
PROJECT_STATUSES: tuple[str, ...] = ("planned", "in progress", "completed", "on hold", "archived")


class ProjectDetail(Base):
    """프로젝트 상세 모델 — 프로젝트 상세 페이지에 표시되는 본문.

    Project detail model — The "why" and "how" write-up shown on a
    project's detail page.

    JSON Structure:
        why: [{
            "title": str, "why_position": int,
            "content_parts": [{"main": str, "list_items": [{"list_content": str}]}],
            "gains": [str], "links": {name: url},
            "media": [{"alt": str, "name": str, "url": str, "type": DEMO_TYPES}]
        }]
        how: [{"title": str, "how_position": int, "content_parts": [...]}]

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        project_id: 연결된 프로젝트 ID (Owning project, nullable)
        name: 프로젝트 이름 — URL 경로에 사용 (Project name used in the detail URL)
        why: 동기 섹션 목록 (Motivation sections)
        how: 구현 섹션 목록 (Implementation sections)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "project_details"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    why: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    how: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))


class Project(Base):
    """프로젝트 모델 — 사용자 포트폴리오의 프로젝트 항목.

    Project model — A portfolio entry shown on the owner's home page.
    Project names are unique per user.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        user_id: 소유자 FK (Owner foreign key)
        name: 프로젝트 이름 (Short name, unique per user)
        title: 표시 제목 (Display title)
        description: 설명 (Description)
        demo: 데모 URL (Demo media URL)
        demo_type: 데모 유형 (One of DEMO_TYPES)
        link: 저장소/사이트 링크 (Repository or site link)
        technologies: 사용 기술 목록 (Technologies used)
        status: 진행 상태 (One of PROJECT_STATUSES)
        started_on: 시작일 (Start date)
        first_push / last_push: 첫/마지막 푸시 일시 (First/last push timestamps)
        deployment_date: 배포일 (Deployment date)
        details_id: 상세 페이지 FK (Linked project detail)
    """

    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소유자 FK — Owner (CASCADE: 사용자 삭제 시 프로젝트도 삭제)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    demo: Mapped[str | None] = mapped_column(String(500), nullable=True)
    demo_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    link: Mapped[str | None] = mapped_column(String(500), nullable=True)
    technologies: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="planned")
    started_on: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    first_push: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_push: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    deployment_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    # 상세 페이지 FK — 상세 삭제 시 연결 해제 (SET NULL on detail deletion)
    details_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("project_details.id", ondelete="SET NULL"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_project_user_name"),
    )

    # 관계 — Relationships
    user = relationship("User", back_populates="projects")
