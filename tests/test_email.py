"""마일스톤 알림 메일 테스트.

Milestone email tests — Message parts and SMTP hand-off, with
aiosmtplib.send replaced by a recorder.
"""

from datetime import datetime, timezone

import pytest

from portfolio.config import settings
from portfolio.schemas.lsi import LsiMilestoneNotification, LsiRecordResponse
from portfolio.utils import email as email_utils


@pytest.fixture
def notification() -> LsiMilestoneNotification:
    return LsiMilestoneNotification(
        lsi_record=LsiRecordResponse(
            lsi="jdoe-1a2b3c_AbCdEfG",
            social_platform="github",
            count=10,
            generated_at=datetime.now(timezone.utc),
        ),
        username="jdoe",
        user_email="jane@example.com",
        lsi_milestone_target=10,
    )


@pytest.fixture
def smtp_outbox(monkeypatch) -> list:
    """aiosmtplib.send 호출을 기록합니다 (Record SMTP hand-offs)."""
    outbox: list = []

    async def _fake_send(message, **kwargs):
        outbox.append((message, kwargs))

    monkeypatch.setattr(email_utils.aiosmtplib, "send", _fake_send)
    return outbox


class TestMilestoneEmail:
    """마일스톤 메일 구성 및 발송 테스트."""

    def test_build_message(self, notification):
        """제목, 텍스트, HTML 본문 생성."""
        subject, text, html = email_utils.build_milestone_message(notification)
        assert subject == "github Visitor Milestone Target Reached!!"
        assert text.startswith("Congratulations jdoe!!")
        assert "visitor number 10 from github" in text
        assert "<strong>jdoe</strong>" in html
        assert "visitor number 10 from github" in html

    async def test_sends_text_and_html_parts(self, monkeypatch, notification, smtp_outbox):
        """텍스트와 HTML 두 파트로 소유자에게 발송."""
        monkeypatch.setattr(settings, "NOTIFICATION_EMAIL_SENDER", "noreply@example.com")
        await email_utils.send_lsi_milestone_notification(notification)

        assert len(smtp_outbox) == 1
        message, kwargs = smtp_outbox[0]
        assert message["To"] == "jane@example.com"
        assert message["Subject"] == "github Visitor Milestone Target Reached!!"
        assert "noreply@example.com" in message["From"]
        content_types = [part.get_content_type() for part in message.get_payload()]
        assert content_types == ["text/plain", "text/html"]
        assert kwargs["hostname"] == settings.SMTP_HOST
        assert kwargs["start_tls"] is True

    async def test_plain_text_only(self, smtp_outbox):
        """HTML 없이 호출하면 텍스트 파트만."""
        await email_utils.send_email("ops@example.com", "hello", "plain body")
        message, _ = smtp_outbox[0]
        assert [part.get_content_type() for part in message.get_payload()] == ["text/plain"]
