"""Outbound mail port."""

from abc import ABC, abstractmethod


class EmailPort(ABC):
    """Sends one plain-text message to one recipient."""

    @abstractmethod
    def send(self, to: str, subject: str, body: str) -> dict:
        """Deliver a message.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
