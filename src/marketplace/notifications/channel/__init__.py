"""Mailer factory.

Provides get_mailer() / set_mailer() to swap implementations:
- SmtpEmailAdapter when an SMTP host is configured
- FakeEmailAdapter otherwise (development and testing)
"""

from marketplace.config import get_settings
from marketplace.notifications.channel.email_port import EmailPort
from marketplace.notifications.channel.fake_email import FakeEmailAdapter
from marketplace.notifications.channel.smtp_email import SmtpEmailAdapter

_current_mailer: EmailPort | None = None


def get_mailer() -> EmailPort:
    """Return the current mailer, building it from settings on first use."""
    global _current_mailer
    if _current_mailer is None:
        mail_settings = get_settings().mail
        _current_mailer = SmtpEmailAdapter(mail_settings) if mail_settings.host else FakeEmailAdapter()
    return _current_mailer


def set_mailer(mailer: EmailPort) -> None:
    """Override the active mailer (useful for tests)."""
    global _current_mailer
    _current_mailer = mailer


def reset_mailer() -> None:
    """Reset to the mailer derived from settings."""
    global _current_mailer
    _current_mailer = None
