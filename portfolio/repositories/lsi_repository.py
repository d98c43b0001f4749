"""LSI 레포지토리 — LSI 기록 조회 및 방문자 수 증가 쿼리.

LSI Repository — Queries for Link Source Identifier records, including
the atomic visitor-count increment.
"""

from uuid import UUID

from sqlalchemy import Row, Select, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.models.lsi_record import LsiRecord
from portfolio.repositories.base import BaseRepository


class LsiRepository(BaseRepository[LsiRecord]):
    """LSI 기록 테이블 레포지토리.

    Repository handling database queries for the lsi_records table.
    """

    def __init__(self) -> None:
        super().__init__(LsiRecord)

    async def get_for_platform(
        self,
        db: AsyncSession,
        user_id: UUID,
        social_platform: str,
    ) -> LsiRecord | None:
        """사용자의 특정 플랫폼 LSI 기록을 조회합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 소유자 UUID (Owner UUID)
            social_platform: 소셜 플랫폼 이름 (Social platform name)

        Returns:
            LsiRecord | None: LSI 기록 또는 None (LSI record or None)
        """
        result = await db.execute(
            select(LsiRecord).where(
                LsiRecord.user_id == user_id,
                LsiRecord.social_platform == social_platform,
            )
        )
        return result.scalar_one_or_none()

    async def get_user_records(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> list[LsiRecord]:
        """사용자의 모든 LSI 기록을 생성 순으로 조회합니다."""
        query: Select = (
            select(LsiRecord)
            .where(LsiRecord.user_id == user_id)
            .order_by(LsiRecord.generated_at)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def increment_count(
        self,
        db: AsyncSession,
        user_id: UUID,
        lsi: str,
    ) -> Row | None:
        """LSI 방문자 수를 원자적으로 1 증가시킵니다.

        Atomically increment the visitor count of the user's record for
        this LSI with a single ``UPDATE ... SET count = count + 1 RETURNING``.
        Each concurrent caller observes a distinct post-increment count.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 소유자 UUID (Owner UUID)
            lsi: 방문에 사용된 LSI (LSI the visitor came through)

        Returns:
            Row | None: 증가 후 (lsi, social_platform, count, generated_at),
                        일치하는 기록이 없으면 None
                        (Post-increment row, or None when nothing matched)
        """
        stmt = (
            update(LsiRecord)
            .where(LsiRecord.user_id == user_id, LsiRecord.lsi == lsi)
            .values(count=LsiRecord.count + 1)
            .returning(
                LsiRecord.lsi,
                LsiRecord.social_platform,
                LsiRecord.count,
                LsiRecord.generated_at,
            )
        )
        result = await db.execute(stmt)
        return result.one_or_none()


# 싱글턴 인스턴스 — Singleton instance
lsi_repository: LsiRepository = LsiRepository()
