"""
Notification senders.

HttpEmailNotificationSender posts plain-text emails to an HTTP email API.
LoggingNotificationSender is the fallback when no email API is configured:
it records that a message would have been sent, never the token itself.
"""

import logging
from urllib.parse import quote, urlencode

import httpx

from auth_service.app.services.notification_sender import INotificationSender
from auth_service.domain.entities import TokenPurpose

logger = logging.getLogger(__name__)

_EMAIL_API_TIMEOUT = 10.0

_TEMPLATES = {
    TokenPurpose.password_reset: (
        "Reset your password",
        "reset-password",
        "Click this link to reset your password:\n\n{url}\n\n"
        "This link expires in 1 hour. "
        "If you didn't request this, you can safely ignore this email.",
    ),
    TokenPurpose.email_verification: (
        "Verify your email address",
        "verify-email",
        "Click this link to verify your email address:\n\n{url}\n\n"
        "This link expires in 24 hours.",
    ),
}


def build_link(frontend_url: str, path: str, token: str) -> str:
    params = urlencode({"token": token}, quote_via=quote)
    return f"{frontend_url.rstrip('/')}/{path}?{params}"


class HttpEmailNotificationSender(INotificationSender):
    """Sends token links through an HTTP email API (Resend-compatible payload)"""

    def __init__(self, api_url: str, api_key: str, sender: str, frontend_url: str):
        self.api_url = api_url
        self.api_key = api_key
        self.sender = sender
        self.frontend_url = frontend_url

    async def send(self, email: str, token: str, purpose: TokenPurpose) -> None:
        subject, path, body = _TEMPLATES[purpose]
        url = build_link(self.frontend_url, path, token)

        try:
            async with httpx.AsyncClient() as client:
                resp = await client.post(
                    self.api_url,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    json={
                        "from": self.sender,
                        "to": email,
                        "subject": subject,
                        "text": body.format(url=url),
                    },
                    timeout=_EMAIL_API_TIMEOUT,
                )
                resp.raise_for_status()
        except httpx.HTTPError:
            logger.warning(f"Failed to send {purpose.value} email", exc_info=True)


class LoggingNotificationSender(INotificationSender):
    """Development sender: logs the delivery, withholds the token"""

    async def send(self, email: str, token: str, purpose: TokenPurpose) -> None:
        logger.info(
            f"Email delivery not configured; {purpose.value} message for {email} not sent"
        )


def create_notification_sender(config) -> INotificationSender:
    if config.EMAIL_API_URL:
        return HttpEmailNotificationSender(
            api_url=config.EMAIL_API_URL,
            api_key=config.EMAIL_API_KEY,
            sender=config.EMAIL_FROM,
            frontend_url=config.FRONTEND_URL,
        )
    return LoggingNotificationSender()
