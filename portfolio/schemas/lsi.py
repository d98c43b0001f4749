"""LSI 관련 Pydantic 요청/응답 스키마 정의.

Link Source Identifier Pydantic request/response schema definitions.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from portfolio.config import settings
from portfolio.schemas.auth import USERNAME_PATTERN


class CreateLsiRequest(BaseModel):
    """LSI 생성 요청 스키마.

    LSI creation request schema.
    The platform must be lowercase and one of ALLOWED_SOCIAL_PLATFORM_NAMES.

    Attributes:
        username: LSI 소유자 아이디 (Owner username)
        social_media_platform: 소셜 플랫폼 이름 (Social platform name, e.g. "github")
    """

    username: str = Field(..., min_length=2, max_length=40, pattern=USERNAME_PATTERN)
    social_media_platform: str = Field(..., min_length=1)

    @field_validator("social_media_platform")
    @classmethod
    def _check_platform(cls, value: str) -> str:
        # 소문자 + 허용 목록 검사 — Lowercase and allow-list check
        if value != value.lower() or value not in settings.ALLOWED_SOCIAL_PLATFORM_NAMES:
            raise PydanticCustomError(
                "invalid_platform",
                "'{value}' is not a valid social_media_platform",
                {"value": value},
            )
        return value


class CreateLsiResponse(BaseModel):
    """LSI 생성 응답 — POST /link/create 응답 본문."""

    message: str = "New social link generated"
    link: str


class LsiRecordResponse(BaseModel):
    """LSI 기록 응답 스키마.

    Attributes:
        lsi: LSI 문자열 (LSI string)
        social_platform: 소셜 플랫폼 이름 (Social platform name)
        count: 방문자 수 (Visitor count)
        generated_at: 생성 일시 (Generation timestamp)
    """

    lsi: str
    social_platform: str
    count: int
    generated_at: datetime


class LsiRecordListEnvelope(BaseModel):
    """LSI 목록 응답 래퍼."""

    status: str = "success"
    data: list[LsiRecordResponse]


class LsiMilestoneNotification(BaseModel):
    """LSI 마일스톤 알림 데이터.

    Data handed from the count update to the milestone email.

    Attributes:
        lsi_record: 마일스톤에 도달한 LSI 기록 (The LSI record that hit the target)
        username: 소유자 아이디 (Owner username)
        user_email: 알림 수신 이메일 (Recipient email)
        lsi_milestone_target: 도달한 방문자 수 (Target count that was reached)
    """

    lsi_record: LsiRecordResponse
    username: str
    user_email: str
    lsi_milestone_target: int
