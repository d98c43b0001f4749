"""이메일 발송 유틸리티 — Brevo SMTP (aiosmtplib).

SMTP 설정은 config.py의 SMTP_* 환경 변수로 관리.
"""

import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from html import escape

import aiosmtplib

from portfolio.config import settings
from portfolio.schemas.lsi import LsiMilestoneNotification

logger = logging.getLogger(__name__)


async def send_email(
    to: str,
    subject: str,
    text: str,
    html: str | None = None,
) -> None:
    """이메일 발송.

    Args:
        to: 수신자 이메일 주소
        subject: 제목
        text: 플레인텍스트 본문
        html: HTML 본문 (없으면 텍스트만 발송)
    """
    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = f"{settings.SMTP_FROM_NAME} <{settings.NOTIFICATION_EMAIL_SENDER}>"
    msg["To"] = to

    msg.attach(MIMEText(text, "plain", "utf-8"))
    if html:
        msg.attach(MIMEText(html, "html", "utf-8"))

    await aiosmtplib.send(
        msg,
        hostname=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.SMTP_USER or None,
        password=settings.SMTP_PASSWORD or None,
        start_tls=True,
    )


def build_milestone_message(notification: LsiMilestoneNotification) -> tuple[str, str, str]:
    """마일스톤 알림 메일의 (제목, 텍스트 본문, HTML 본문)을 생성합니다."""
    platform: str = notification.lsi_record.social_platform
    subject = f"{platform} Visitor Milestone Target Reached!!"
    text = (
        f"Congratulations {notification.username}!! \n\n"
        f"You just got visitor number {notification.lsi_milestone_target} "
        f"from {platform} to your portfolio website. More wins!!"
    )
    html = (
        f"<p>Congratulations <strong>{escape(notification.username)}</strong>!!</p>"
        f"<p>You just got visitor number {notification.lsi_milestone_target} "
        f"from {escape(platform)} to your portfolio website. More wins!!</p>"
    )
    return subject, text, html


async def send_lsi_milestone_notification(notification: LsiMilestoneNotification) -> None:
    """LSI 마일스톤 도달 알림 메일 발송.

    Send the milestone email to the LSI owner.
    """
    subject, text, html = build_milestone_message(notification)
    await send_email(notification.user_email, subject, text, html)
    logger.info("LSI milestone target notification email sent to %s", notification.user_email)
