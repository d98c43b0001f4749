"""LSI 기록 SQLAlchemy ORM 모델 정의.

Link Source Identifier record SQLAlchemy ORM model definition.

Tables:
    - lsi_records: 플랫폼별 추적 링크와 방문자 수 (Per-platform tracking links and visitor counts)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, Integer, DateTime, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio.database import Base


class LsiRecord(Base):
    """LSI 기록 모델 — 소셜 플랫폼별 공유 링크.

    LSI record model — One shareable link per user and social platform.
    The visitor count is only ever changed through an atomic
    ``count = count + 1`` update so concurrent visits never lose increments.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        user_id: 소유자 FK (Owner foreign key)
        lsi: LSI 문자열 (The LSI, globally unique)
        social_platform: 소셜 플랫폼 이름 (Social platform name)
        count: 방문자 수 (Visitor count)
        generated_at: 생성 일시 UTC (Generation timestamp)

    Constraints:
        uq_lsi_user_platform: 사용자별 플랫폼당 하나 (One LSI per user and platform)
    """

    __tablename__ = "lsi_records"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소유자 FK — Owner (CASCADE: 사용자 삭제 시 LSI도 삭제)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    lsi: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    social_platform: Mapped[str] = mapped_column(String(50), nullable=False)
    # 방문자 수 — Visitor count (원자적 증가만 허용, atomic increments only)
    count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    generated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("user_id", "social_platform", name="uq_lsi_user_platform"),
    )

    # 관계 — Relationships
    user = relationship("User", back_populates="lsi_records")
