"""사용자 레포지토리 — 사용자 프로필 조회 쿼리.

User Repository — Profile lookup queries for users.
Extends BaseRepository with lookups by the two unique public keys
(email and username) and eager loading of the portfolio projects.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from portfolio.models.user import User
from portfolio.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the users table.
    """

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> User | None:
        """이메일로 사용자를 조회합니다 (대소문자 무시).

        Retrieve a user by email. Emails are stored lowercase, so the
        lookup value is lowercased as well.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 이메일 주소 (Email address)

        Returns:
            User | None: 사용자 또는 None (User or None)
        """
        result = await db.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()

    async def get_by_username(
        self,
        db: AsyncSession,
        username: str,
    ) -> User | None:
        """아이디로 사용자를 조회합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: 사용자 아이디 (Username)

        Returns:
            User | None: 사용자 또는 None (User or None)
        """
        result = await db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_profile(
        self,
        db: AsyncSession,
        username: str,
    ) -> User | None:
        """공개 프로필을 프로젝트와 함께 조회합니다.

        Retrieve a user's public profile with projects eagerly loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: 사용자 아이디 (Username)

        Returns:
            User | None: 프로젝트가 로드된 사용자 또는 None
                         (User with projects loaded, or None)
        """
        query: Select = (
            select(User)
            .options(selectinload(User.projects))
            .where(User.username == username)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
