"""Integration tests for the free-form mail endpoint."""

import pytest
from support.api import build_client

from marketplace.notifications.api import email_router


@pytest.fixture()
def client():
    return build_client(email_router)


def _payload(**overrides):
    payload = {"to_email": "bob@example.com", "subject": "Hello", "message": "Your parcel is on its way."}
    payload.update(overrides)
    return payload


class TestSendEmail:
    def test_sends_message(self, client, mailer):
        response = client.post("/email/send", json=_payload())

        assert response.status_code == 200
        assert response.json() == {"message": "Email sent successfully."}
        [message] = mailer.messages_to("bob@example.com")
        assert message["subject"] == "Hello"
        assert message["body"] == "Your parcel is on its way."

    @pytest.mark.parametrize("field", ["to_email", "subject", "message"])
    def test_missing_field_is_400(self, client, mailer, field):
        payload = _payload()
        del payload[field]

        response = client.post("/email/send", json=payload)

        assert response.status_code == 400
        assert field in response.json()["error"]
        assert mailer.outbox == []

    def test_blank_field_is_400(self, client, mailer):
        assert client.post("/email/send", json=_payload(subject="   ")).status_code == 400
        assert mailer.outbox == []

    def test_delivery_failure_is_502(self, client, mailer):
        mailer.configure(should_succeed=False)
        response = client.post("/email/send", json=_payload())
        assert response.status_code == 502

    def test_mailer_crash_is_502(self, client, mailer):
        mailer.configure(raise_on_send=ConnectionError("relay down"))
        assert client.post("/email/send", json=_payload()).status_code == 502
