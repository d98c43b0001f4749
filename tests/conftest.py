"""테스트 인프라 — 테스트별 임시 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Per-test temporary SQLite DB, session, and httpx client fixtures.
Each test gets a fresh database file under tmp_path, so no cleanup is needed.
Event handlers are pointed at the same database and outgoing email is captured.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from portfolio.database import Base, get_db
from portfolio.events.profile_events import profile_events
from portfolio.main import app
from portfolio.models import *  # noqa: F401,F403 — register all models with metadata
from portfolio.schemas.lsi import LsiMilestoneNotification
from portfolio.utils.jwt import create_access_token
from portfolio.utils.password import hash_password


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 새 SQLite 파일에 스키마를 생성합니다."""
    eng = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'portfolio_test.db'}",
        connect_args={"timeout": 30},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    async with session_factory() as session:
        yield session


@pytest.fixture(autouse=True)
def event_sessions(monkeypatch, session_factory):
    """이벤트 핸들러가 테스트 DB를 사용하도록 세션 팩토리를 교체합니다."""
    monkeypatch.setattr(profile_events, "session_factory", session_factory)


@pytest.fixture(autouse=True)
def sent_emails(monkeypatch) -> list[LsiMilestoneNotification]:
    """마일스톤 메일 발송을 가로채 기록합니다 (Capture milestone emails)."""
    sent: list[LsiMilestoneNotification] = []

    async def _fake_send(notification: LsiMilestoneNotification) -> None:
        sent.append(notification)

    monkeypatch.setattr(
        "portfolio.services.lsi_service.send_lsi_milestone_notification", _fake_send
    )
    return sent


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# 이벤트 핸들러는 별도 세션을 쓰므로 픽스처 데이터는 커밋합니다
# Event handlers use their own session, so fixture data is committed
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def owner(db: AsyncSession):
    """포트폴리오 소유자를 생성합니다."""
    from portfolio.models.user import User
    user = User(
        first_name="Jane",
        last_name="Doe",
        username="jdoe",
        email="jane@example.com",
        password_hash=hash_password("portfolio123!"),
        title=["Backend Engineer"],
        about="I build APIs.",
        skills=[{"class": "language", "detail": "Python"}],
        contact_info={"github": "https://github.com/jdoe"},
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def other_owner(db: AsyncSession):
    """두 번째 포트폴리오 소유자를 생성합니다."""
    from portfolio.models.user import User
    user = User(
        first_name="John",
        last_name="Roe",
        username="jroe",
        email="john@example.com",
        password_hash=hash_password("portfolio456!"),
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def github_lsi(db: AsyncSession, owner):
    """소유자의 github LSI 기록을 생성합니다."""
    from portfolio.models.lsi_record import LsiRecord
    from portfolio.utils.lsi import create_lsi
    record = LsiRecord(
        user_id=owner.id,
        lsi=create_lsi(owner.username, "github"),
        social_platform="github",
        count=0,
    )
    db.add(record)
    await db.commit()
    await db.refresh(record)
    return record


def make_token(user) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({"sub": str(user.id), "email": user.email})


@pytest.fixture
def owner_token(owner) -> str:
    return make_token(owner)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
