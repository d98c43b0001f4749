"""사용자 프로필 SQLAlchemy ORM 모델 정의.

User profile SQLAlchemy ORM model definitions.
A user is a portfolio owner: the account used to log in to the dashboard
and the public profile served to the portfolio frontend.

Tables:
    - users: 사용자 계정 및 포트폴리오 프로필 (Accounts and portfolio profiles)
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, String, Text, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio.database import Base


class User(Base):
    """사용자 모델 — 계정 정보 및 공개 프로필.

    User model — Account credentials and the public portfolio profile.
    Nested profile sections (skills, education, contact info, logo) are
    stored as JSON since they are only ever read and written as a whole.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        first_name: 이름 (First name)
        last_name: 성 (Last name)
        other_names: 기타 이름 목록 (Other names)
        username: 로그인/공개 URL 아이디 (Public username, globally unique, never contains "-")
        email: 이메일 (Email, globally unique, stored lowercase)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        title: 직함 목록 (Headline titles, e.g. ["Backend Engineer"])
        resume: 이력서 URL (Resume URL)
        headline_photo: 대표 사진 URL (Headline photo URL)
        about: 자기소개 (About text)
        skills: 기술 목록 (List of {class, type, focus, branch, detail})
        education: 학력 목록 (Education entries)
        contact_info: 연락처 {매체: 값} (Contact info {medium: value})
        logo: 로고 {모드: URL} (Logo URLs per display mode)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        projects: 프로젝트 목록 (Portfolio projects, cascade delete)
        lsi_records: LSI 기록 (Link Source Identifier records, cascade delete)
    """

    __tablename__ = "users"

    # 사용자 고유 식별자 — User unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str] = mapped_column(String(40), nullable=False)
    last_name: Mapped[str] = mapped_column(String(40), nullable=False)
    other_names: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    # 공개 아이디 — Public username (LSI 접두사로 사용, used as the LSI prefix)
    username: Mapped[str] = mapped_column(String(40), nullable=False, unique=True, index=True)
    # 이메일 — 소문자로 저장 (Stored lowercase, used for login and notifications)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    # 비밀번호 해시 — bcrypt hashed password (평문 저장 금지, never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    resume: Mapped[str | None] = mapped_column(String(500), nullable=True)
    headline_photo: Mapped[str | None] = mapped_column(String(500), nullable=True)
    about: Mapped[str | None] = mapped_column(Text, nullable=True)
    skills: Mapped[list[dict[str, Any]] | None] = mapped_column(JSON, nullable=True)
    education: Mapped[list[dict[str, Any]] | None] = mapped_column(JSON, nullable=True)
    contact_info: Mapped[dict[str, str] | None] = mapped_column(JSON, nullable=True)
    logo: Mapped[dict[str, str] | None] = mapped_column(JSON, nullable=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    projects = relationship("Project", back_populates="user", cascade="all, delete-orphan", order_by="Project.started_on")
    lsi_records = relationship("LsiRecord", back_populates="user", cascade="all, delete-orphan")
