"""프로필 이벤트 디스패처 — 방문자 수 갱신과 마일스톤 알림을 뷰 요청에서 분리.

Profile event dispatcher. Decouples the visitor-count update and the
milestone email from serving the public profile page.

Events:
    - "full lsi used" (email, username, lsi):
        LSI로 프로필이 조회됨 → 방문자 수 증가, 마일스톤 도달 시 다음 이벤트 발행
        (Profile viewed through a full LSI → increment the count and emit
        "lsi milestone reached" when the target was just hit)
    - "lsi milestone reached" (notification):
        소유자에게 마일스톤 메일 발송 (Email the owner)

핸들러는 요청 세션이 닫힌 뒤 실행되므로 session_factory로 자체 세션을 엽니다.
Handlers run after the request session is closed and open their own
session from ``session_factory``.
"""

import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portfolio.database import async_session
from portfolio.schemas.lsi import LsiMilestoneNotification
from portfolio.services.lsi_service import lsi_service

logger = logging.getLogger(__name__)

FULL_LSI_USED: str = "full lsi used"
LSI_MILESTONE_REACHED: str = "lsi milestone reached"

EventHandler = Callable[..., Awaitable[None]]


class ProfileEvents:
    """프로세스 내 비동기 이벤트 디스패처.

    Same-process async event dispatcher. Handlers for an event are awaited
    in registration order. A failing handler is logged and skipped; it never
    propagates to the emitter.

    Attributes:
        session_factory: 핸들러용 DB 세션 팩토리 (Session factory used by handlers)
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory: async_sessionmaker[AsyncSession] = session_factory
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)
        self._register_handlers()

    def _register_handlers(self) -> None:
        self.on(FULL_LSI_USED, self._handle_lsi_count_update)
        self.on(LSI_MILESTONE_REACHED, self._handle_lsi_milestone_reached)

    def on(self, event: str, handler: EventHandler) -> None:
        """이벤트 핸들러를 등록합니다 (Register an async handler for an event)."""
        self._handlers[event].append(handler)

    async def emit(self, event: str, *args: Any) -> None:
        """이벤트를 발행하고 등록된 핸들러를 순서대로 실행합니다.

        Emit an event, awaiting every registered handler in order.

        Args:
            event: 이벤트 이름 (Event name)
            *args: 핸들러에 전달할 인자 (Positional arguments for the handlers)
        """
        handlers: list[EventHandler] = self._handlers.get(event, [])
        if not handlers:
            logger.debug("No handlers registered for event %r", event)
            return

        for handler in handlers:
            try:
                await handler(*args)
            except Exception:
                logger.exception("Unexpected error while handling profile event %r", event)

    async def _handle_lsi_count_update(self, email: str, username: str, lsi: str) -> None:
        async with self.session_factory() as db:
            notification: LsiMilestoneNotification | None = await lsi_service.update_lsi_count(
                db, email, username, lsi
            )
            await db.commit()

        if notification is not None:
            await self.emit(LSI_MILESTONE_REACHED, notification)

    async def _handle_lsi_milestone_reached(self, notification: LsiMilestoneNotification) -> None:
        await lsi_service.notify_on_lsi_milestone(notification)


# 싱글턴 인스턴스 — Singleton instance
profile_events: ProfileEvents = ProfileEvents(async_session)
