"""뷰 서비스 — 포트폴리오 프론트엔드에 공개되는 데이터 조회.

View Service — Read-only data served to the public portfolio frontend.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.models.project import Project, ProjectDetail
from portfolio.models.user import User
from portfolio.repositories.project_repository import project_detail_repository
from portfolio.repositories.user_repository import user_repository
from portfolio.schemas.profile import (
    ProfileResponse,
    ProjectDetailResponse,
    ProjectResponse,
)
from portfolio.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def project_to_response(project: Project) -> ProjectResponse:
    """프로젝트 모델을 응답 스키마로 변환합니다."""
    return ProjectResponse(
        id=str(project.id),
        name=project.name,
        title=project.title,
        description=project.description,
        demo=project.demo,
        demo_type=project.demo_type,
        link=project.link,
        technologies=project.technologies or [],
        status=project.status,
        started_on=project.started_on,
        first_push=project.first_push,
        last_push=project.last_push,
        deployment_date=project.deployment_date,
        details_id=str(project.details_id) if project.details_id else None,
    )


class ViewService:
    """공개 포트폴리오 데이터 조회 서비스.

    Service serving the public portfolio pages.
    """

    def _profile_to_response(self, user: User) -> ProfileResponse:
        # password_hash와 lsi_records는 공개하지 않음 — never exposed publicly
        return ProfileResponse(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            other_names=user.other_names or [],
            username=user.username,
            email=user.email,
            title=user.title or [],
            resume=user.resume,
            headline_photo=user.headline_photo,
            about=user.about,
            skills=user.skills or [],
            projects=[project_to_response(p) for p in user.projects],
            education=user.education or [],
            contact_info=user.contact_info or {},
            logo=user.logo or {},
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    async def get_home_page_profile(
        self,
        db: AsyncSession,
        username: str,
    ) -> ProfileResponse:
        """홈 페이지에 표시할 공개 프로필을 조회합니다.

        Retrieve the public profile, with projects, for the owner's home page.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: 소유자 아이디 (Owner username decoded from the LSI)

        Returns:
            ProfileResponse: 공개 프로필 (Public profile)

        Raises:
            NotFoundError: 사용자가 없을 때 (No user with that username)
        """
        user: User | None = await user_repository.get_profile(db, username)
        if user is None:
            raise NotFoundError(f"User with username: {username}")
        return self._profile_to_response(user)

    async def get_project_detail_by(
        self,
        db: AsyncSession,
        project_name: str,
        project_detail_id: UUID | None = None,
    ) -> ProjectDetailResponse:
        """프로젝트 상세 페이지 데이터를 조회합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            project_name: 프로젝트 이름 (Project name)
            project_detail_id: 프로젝트 상세 UUID (Optional detail identifier)

        Returns:
            ProjectDetailResponse: 프로젝트 상세 (Project detail)

        Raises:
            NotFoundError: 일치하는 상세가 없을 때 (No matching project detail)
        """
        detail: ProjectDetail | None = await project_detail_repository.get_by_name(
            db, project_name, project_detail_id
        )
        if detail is None:
            logger.info("No project detail for %s (id=%s)", project_name, project_detail_id)
            raise NotFoundError(f"Project detail for project: {project_name}")
        return ProjectDetailResponse(
            id=str(detail.id),
            project_id=str(detail.project_id) if detail.project_id else None,
            name=detail.name,
            why=detail.why or [],
            how=detail.how or [],
        )


# 싱글턴 인스턴스 — Singleton instance
view_service: ViewService = ViewService()
