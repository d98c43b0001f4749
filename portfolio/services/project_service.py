"""프로젝트 서비스 — 대시보드에서 포트폴리오 프로젝트 추가.

Project Service — Adds portfolio projects from the dashboard.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.models.project import Project
from portfolio.models.user import User
from portfolio.repositories.project_repository import (
    project_detail_repository,
    project_repository,
)
from portfolio.schemas.profile import ProjectCreate, ProjectResponse
from portfolio.services.view_service import project_to_response
from portfolio.utils.exceptions import DuplicateError, NotFoundError

logger = logging.getLogger(__name__)


class ProjectService:
    """프로젝트 관련 비즈니스 로직을 처리하는 서비스."""

    async def add_project(
        self,
        db: AsyncSession,
        user: User,
        data: ProjectCreate,
    ) -> ProjectResponse:
        """인증된 사용자의 프로필에 새 프로젝트를 추가합니다.

        Attach a new project to the authenticated owner's profile.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user: 인증된 사용자 (Authenticated owner)
            data: 프로젝트 생성 데이터 (Project creation data)

        Returns:
            ProjectResponse: 생성된 프로젝트 (Created project)

        Raises:
            DuplicateError: 같은 이름의 프로젝트가 있을 때 (Name already used by this owner)
            NotFoundError: details_id의 프로젝트 상세가 없을 때 (Unknown project detail)
        """
        if await project_repository.exists(db, {"user_id": user.id, "name": data.name}):
            raise DuplicateError(f"A project named {data.name} already exists.")

        if data.details_id is not None:
            detail = await project_detail_repository.get_by_id(db, data.details_id)
            if detail is None:
                raise NotFoundError(f"Project detail with id: {data.details_id}")

        values = data.model_dump(exclude_none=True)
        values["user_id"] = user.id
        values.setdefault("started_on", datetime.now(timezone.utc))
        values.setdefault("technologies", [])

        owner_name: str = user.username
        try:
            project: Project = await project_repository.create(db, values)
        except IntegrityError as e:
            # 동시 요청이 같은 이름을 먼저 사용함 — uq_project_user_name hit by a concurrent request
            await db.rollback()
            logger.warning("Project %s for %s lost a race to a concurrent request", data.name, owner_name)
            raise DuplicateError(f"A project named {data.name} already exists.") from e
        logger.info("Project %s added for %s", project.name, owner_name)
        return project_to_response(project)


# 싱글턴 인스턴스 — Singleton instance
project_service: ProjectService = ProjectService()
