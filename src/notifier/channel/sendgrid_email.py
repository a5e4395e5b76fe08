"""SendGrid email adapter — delivers mail through the SendGrid v3 API.

The SendGrid client is synchronous, so each send runs in a worker thread.
"""

import asyncio
import json

import structlog
from python_http_client.exceptions import HTTPError
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from notifier.channel.email_port import EmailPort

logger = structlog.get_logger(__name__)


def _error_details(body) -> str | None:
    """Join the ``errors[].message`` entries of a SendGrid error payload."""
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if not body:
        return None

    try:
        payload = json.loads(body)
    except (TypeError, json.JSONDecodeError):
        return str(body)

    errors = payload.get("errors") if isinstance(payload, dict) else None
    if isinstance(errors, list):
        messages = [str(item["message"]) for item in errors if isinstance(item, dict) and item.get("message")]
        if messages:
            return "; ".join(messages)
    return str(body)


class SendGridEmailAdapter(EmailPort):
    def __init__(self, api_key: str, sender: str):
        self.api_key = api_key
        self.sender = sender

    @classmethod
    def from_settings(cls, settings) -> "SendGridEmailAdapter":
        return cls(api_key=settings.SENDGRID_API_KEY, sender=settings.EMAIL_FROM)

    def build_message(self, to: str, subject: str, body: str, html_body: str | None = None) -> Mail:
        return Mail(
            from_email=self.sender,
            to_emails=to,
            subject=subject,
            plain_text_content=body,
            html_content=html_body,
        )

    def _deliver(self, message: Mail):
        return SendGridAPIClient(self.api_key).send(message)

    async def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> dict:
        if not self.api_key:
            logger.info("SendGrid configuration incomplete, email skipped", to=to)
            return {"message_id": None, "status": "failed", "error": "SendGrid API key not configured"}

        message = self.build_message(to, subject, body, html_body)

        try:
            response = await asyncio.to_thread(self._deliver, message)
        except (HTTPError, OSError) as exc:
            error = _error_details(getattr(exc, "body", None)) or str(exc)
            logger.warning("SendGrid delivery failed", to=to, status_code=getattr(exc, "status_code", None), error=error)
            return {"message_id": None, "status": "failed", "error": error}

        status_code = getattr(response, "status_code", None)
        if not isinstance(status_code, int) or not 200 <= status_code < 300:
            error = _error_details(getattr(response, "body", None)) or f"SendGrid responded with {status_code}"
            logger.warning("SendGrid rejected email", to=to, status_code=status_code, error=error)
            return {"message_id": None, "status": "failed", "error": error}

        headers = getattr(response, "headers", None) or {}
        return {"message_id": headers.get("X-Message-Id"), "status": "sent"}
