"""SMTP mailer built on the standard library client."""

import smtplib
from email.message import EmailMessage
from email.utils import make_msgid

import structlog

from marketplace.config import MailSettings
from marketplace.notifications.channel.email_port import EmailPort

logger = structlog.get_logger(__name__)


class SmtpEmailAdapter(EmailPort):
    """Delivers mail through an SMTP relay described by ``MailSettings``.

    Every connection is opened with the configured timeout so a slow relay
    cannot hold a request indefinitely.
    """

    def __init__(self, settings: MailSettings) -> None:
        if not settings.host:
            raise ValueError("SMTP host is not configured")
        self.settings = settings

    def _build_message(self, to: str, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.settings.sender
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = make_msgid()
        message.set_content(body)
        return message

    def send(self, to: str, subject: str, body: str) -> dict:
        message = self._build_message(to, subject, body)
        try:
            with smtplib.SMTP(self.settings.host, self.settings.port, timeout=self.settings.timeout) as client:
                if self.settings.use_tls:
                    client.starttls()
                if self.settings.username:
                    client.login(self.settings.username, self.settings.password or "")
                client.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.warning("SMTP delivery failed", to=to, host=self.settings.host, error=str(exc))
            return {"message_id": None, "status": "failed", "error": str(exc)}

        return {"message_id": message["Message-ID"], "status": "sent"}
