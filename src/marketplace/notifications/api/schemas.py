"""Pydantic schemas for the mail endpoint."""

from pydantic import BaseModel


class SendEmailRequest(BaseModel):
    # Optional so a missing field answers 400 like the rest of the API, not 422
    to_email: str | None = None
    subject: str | None = None
    message: str | None = None


class SendEmailResponse(BaseModel):
    message: str
