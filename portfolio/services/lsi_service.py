"""LSI 서비스 — LSI 생성, 방문자 수 갱신, 마일스톤 알림 비즈니스 로직.

LSI Service — Business logic for Link Source Identifiers.
Creates per-platform links, counts visits made through them, and emails
the owner once when a link's visitor count hits LSI_MILESTONE_TARGET.
"""

import logging
from datetime import datetime, timezone

from aiosmtplib import SMTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.config import settings
from portfolio.models.lsi_record import LsiRecord
from portfolio.models.user import User
from portfolio.repositories.lsi_repository import lsi_repository
from portfolio.repositories.user_repository import user_repository
from portfolio.schemas.lsi import LsiMilestoneNotification, LsiRecordResponse
from portfolio.utils.email import send_lsi_milestone_notification
from portfolio.utils.exceptions import DuplicateError, UnauthorizedError, UnexpectedError
from portfolio.utils.lsi import create_lsi

logger = logging.getLogger(__name__)


class LsiService:
    """LSI 관련 비즈니스 로직을 처리하는 서비스.

    Service handling Link Source Identifier business logic.
    """

    def _to_response(self, record: LsiRecord) -> LsiRecordResponse:
        return LsiRecordResponse(
            lsi=record.lsi,
            social_platform=record.social_platform,
            count=record.count,
            generated_at=record.generated_at,
        )

    async def create_link_source_identifier(
        self,
        db: AsyncSession,
        username: str,
        social_platform: str,
    ) -> str:
        """사용자의 소셜 플랫폼용 새 LSI를 생성합니다.

        Generate and store a new LSI for the user and social platform.
        A user holds at most one LSI per platform.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: LSI 소유자 아이디 (Owner username)
            social_platform: 소셜 플랫폼 이름 (Social platform name)

        Returns:
            str: 생성된 LSI (The generated LSI)

        Raises:
            UnauthorizedError: 등록되지 않은 사용자일 때 (User is not registered)
            DuplicateError: 해당 플랫폼의 LSI가 이미 있을 때 (LSI already exists for the platform)
        """
        logger.info("LSI creation attempt for %s on %s", username, social_platform)

        user: User | None = await user_repository.get_by_username(db, username)
        if user is None:
            logger.warning("LSI creation rejected: %s is not a registered user", username)
            raise UnauthorizedError("Only registered users can perform this action.")

        duplicate_message: str = f"An LSI for {social_platform} already exists."
        existing: LsiRecord | None = await lsi_repository.get_for_platform(db, user.id, social_platform)
        if existing is not None:
            raise DuplicateError(duplicate_message)

        lsi: str = create_lsi(user.username, social_platform)
        try:
            await lsi_repository.create(
                db,
                {
                    "user_id": user.id,
                    "lsi": lsi,
                    "social_platform": social_platform,
                    "count": 0,
                    "generated_at": datetime.now(timezone.utc),
                },
            )
        except IntegrityError as e:
            # 동시 요청이 먼저 생성함 — A concurrent request created it first (uq_lsi_user_platform)
            await db.rollback()
            logger.warning("LSI creation for %s on %s lost a race to a concurrent request", username, social_platform)
            raise DuplicateError(duplicate_message) from e
        logger.info("New %s LSI generated for %s", social_platform, username)
        return lsi

    async def list_lsi_records(
        self,
        db: AsyncSession,
        user: User,
    ) -> list[LsiRecordResponse]:
        """사용자의 LSI 목록을 생성 순으로 조회합니다.

        List the user's LSI records ordered by generation time.
        """
        records: list[LsiRecord] = await lsi_repository.get_user_records(db, user.id)
        return [self._to_response(record) for record in records]

    async def update_lsi_count(
        self,
        db: AsyncSession,
        email: str,
        username: str,
        lsi: str,
    ) -> LsiMilestoneNotification | None:
        """LSI 방문자 수를 증가시키고 마일스톤 도달 여부를 확인합니다.

        Increment the visitor count of an LSI and check the milestone.

        Only the increment that observes exactly LSI_MILESTONE_TARGET
        returns notification data, so the owner is notified at most once
        per LSI even when visits arrive concurrently.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 알림 수신 이메일 (Owner email, used for the notification)
            username: 소유자 아이디 (Owner username)
            lsi: 방문에 사용된 LSI (LSI the visitor came through)

        Returns:
            LsiMilestoneNotification | None: 마일스톤 도달 시 알림 데이터
                                             (Notification data when the target was just reached)

        Raises:
            UnexpectedError: 데이터베이스 오류 시 (On database failure)
        """
        try:
            user: User | None = await user_repository.get_by_username(db, username)
            row = None
            if user is not None:
                row = await lsi_repository.increment_count(db, user.id, lsi)
        except SQLAlchemyError as e:
            raise UnexpectedError(
                "Unexpected error while trying to update an LSI visitor count",
                "LsiService.update_lsi_count",
            ) from e

        if row is None:
            logger.info("LSI count update failed. Invalid LSI hash part received")
            return None

        logger.info(
            "Successfully updated LSI visitor count. Checking if LSI milestone target for %s has been reached",
            row.social_platform,
        )

        target: int = settings.LSI_MILESTONE_TARGET
        if row.count == target:
            return LsiMilestoneNotification(
                lsi_record=LsiRecordResponse(
                    lsi=row.lsi,
                    social_platform=row.social_platform,
                    count=row.count,
                    generated_at=row.generated_at,
                ),
                username=username,
                user_email=email,
                lsi_milestone_target=target,
            )
        if row.count < target:
            logger.info(
                "LSI milestone for %s not reached yet. Currently at %d",
                row.social_platform,
                row.count,
            )
        return None

    async def notify_on_lsi_milestone(
        self,
        notification: LsiMilestoneNotification,
    ) -> None:
        """마일스톤 도달 알림 메일을 발송합니다.

        Email the owner that an LSI reached its visitor milestone.

        Raises:
            UnexpectedError: 메일 발송 실패 시 (When the email could not be sent)
        """
        logger.info("Sending LSI milestone target notification email to %s", notification.user_email)
        try:
            await send_lsi_milestone_notification(notification)
        except (SMTPException, OSError) as e:
            raise UnexpectedError(
                "Unexpected error while sending an LSI milestone notification",
                "LsiService.notify_on_lsi_milestone",
            ) from e


# 싱글턴 인스턴스 — Singleton instance
lsi_service: LsiService = LsiService()
