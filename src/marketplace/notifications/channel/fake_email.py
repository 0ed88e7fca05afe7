"""In-memory mailer for development and tests."""

from uuid import uuid4

from marketplace.notifications.channel.email_port import EmailPort


class FakeEmailAdapter(EmailPort):
    """Keeps every delivered message in ``outbox`` instead of sending it."""

    def __init__(self):
        self.outbox: list[dict] = []
        self.should_succeed = True
        self.raise_on_send: Exception | None = None

    def configure(self, should_succeed: bool = True, raise_on_send: Exception | None = None):
        """Make subsequent sends fail, either with a "failed" status or by raising."""
        self.should_succeed = should_succeed
        self.raise_on_send = raise_on_send

    def send(self, to: str, subject: str, body: str) -> dict:
        if self.raise_on_send is not None:
            raise self.raise_on_send

        if not self.should_succeed:
            return {"message_id": None, "status": "failed", "error": "Mailbox unavailable"}

        message_id = f"mail-{uuid4().hex[:12]}"
        self.outbox.append({"message_id": message_id, "to": to, "subject": subject, "body": body})
        return {"message_id": message_id, "status": "sent"}

    def messages_to(self, address: str) -> list[dict]:
        return [message for message in self.outbox if message["to"] == address]

    def reset(self):
        self.outbox.clear()
        self.should_succeed = True
        self.raise_on_send = None
