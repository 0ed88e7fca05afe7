"""Fire-and-forget mail delivery.

The event handlers in ``identity_events`` and ``inventory_events`` call
``notify()`` once the change that triggered the mail is committed. A
delivery problem is logged and reported through the return value but is
never raised, so registration, activation and stock changes succeed even
when the mail relay is down.

``send_message()`` is the same delivery path for a caller that already has
the subject and body, such as the ``/email/send`` endpoint.
"""

import structlog

from marketplace.notifications.channel import get_mailer
from marketplace.notifications.templates import MailTemplate, get_template

logger = structlog.get_logger(__name__)


def send_message(to: str, subject: str, body: str, **log_fields) -> bool:
    """Hand one message to the mailer. Returns True when delivered."""
    try:
        result = get_mailer().send(to=to, subject=subject, body=body)
    except Exception as exc:
        logger.error("Mail delivery failed", to=to, error=str(exc), **log_fields)
        return False

    if result.get("status") != "sent":
        logger.error(
            "Mail delivery failed",
            to=to,
            error=result.get("error", "Unknown delivery error"),
            **log_fields,
        )
        return False

    logger.info("Mail sent", to=to, message_id=result.get("message_id"), **log_fields)
    return True


def notify(to: str, template: MailTemplate, **context) -> bool:
    """Render ``template`` and send it to ``to``. Returns True when delivered."""
    if not to:
        logger.warning("Mail skipped, no recipient", template=template.value)
        return False

    message = get_template(template).render(context)
    return send_message(to, message["subject"], message["body"], template=template.value)


def notify_many(recipients, template: MailTemplate, **context) -> int:
    """Send the same message to several addresses. Returns the number delivered."""
    return sum(1 for address in recipients if notify(address, template, **context))
