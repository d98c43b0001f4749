"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    user: 사용자 계정 및 프로필 (User accounts and portfolio profiles)
    project: 프로젝트 및 프로젝트 상세 (Projects and project details)
    lsi_record: LSI 기록 (Link Source Identifier records)
"""

from portfolio.models.user import User
from portfolio.models.project import Project, ProjectDetail
from portfolio.models.lsi_record import LsiRecord

__all__ = [
    "User",
    "Project", "ProjectDetail",
    "LsiRecord",
]
