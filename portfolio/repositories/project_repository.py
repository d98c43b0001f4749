"""프로젝트 레포지토리 — 프로젝트 및 프로젝트 상세 쿼리.

Project Repository — Queries for portfolio projects and project details.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.models.project import Project, ProjectDetail
from portfolio.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """프로젝트 테이블 레포지토리.

    Repository handling database queries for the projects table.
    """

    def __init__(self) -> None:
        super().__init__(Project)


class ProjectDetailRepository(BaseRepository[ProjectDetail]):
    """프로젝트 상세 테이블 레포지토리.

    Repository handling database queries for the project_details table.
    """

    def __init__(self) -> None:
        super().__init__(ProjectDetail)

    async def get_by_name(
        self,
        db: AsyncSession,
        name: str,
        detail_id: UUID | None = None,
    ) -> ProjectDetail | None:
        """프로젝트 이름(및 상세 ID)으로 상세를 조회합니다.

        Retrieve a project detail by name. When an id is given, both the id
        and the name must match; otherwise the oldest detail with that name
        is returned.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 프로젝트 이름 (Project name from the URL)
            detail_id: 프로젝트 상세 UUID (Optional detail identifier)

        Returns:
            ProjectDetail | None: 조회된 상세 또는 None (Found detail or None)
        """
        query: Select = select(ProjectDetail).where(ProjectDetail.name == name)
        if detail_id is not None:
            query = query.where(ProjectDetail.id == detail_id)
        result = await db.execute(query.order_by(ProjectDetail.created_at).limit(1))
        return result.scalars().first()


# 싱글턴 인스턴스 — Singleton instances
project_repository: ProjectRepository = ProjectRepository()
project_detail_repository: ProjectDetailRepository = ProjectDetailRepository()
