"""FastAPI route for sending a free-form mail."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError

from marketplace.notifications.api.schemas import SendEmailRequest, SendEmailResponse
from marketplace.notifications.notifier import send_message

email_router = APIRouter(prefix="/email", tags=["email"])


@email_router.post("/send", response_model=SendEmailResponse)
async def send_email(body: SendEmailRequest):
    missing = {
        field: ["This field is required"]
        for field in ("to_email", "subject", "message")
        if not (getattr(body, field) or "").strip()
    }
    if missing:
        raise ValidationError(missing)

    if not send_message(body.to_email.strip(), body.subject, body.message):
        return JSONResponse(status_code=502, content={"error": "The mail could not be delivered"})
    return SendEmailResponse(message="Email sent successfully.")
