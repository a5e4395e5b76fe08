"""Logging SMS adapter — stand-in provider that records messages in the log.

No SMS gateway is wired up yet. Messages are logged with the configured
sender number so operators can see what would have gone out.
"""

from uuid import uuid4

import structlog

from notifier.channel.sms_port import SMSPort

logger = structlog.get_logger(__name__)


class LoggingSMSAdapter(SMSPort):
    def __init__(self, sender: str, enabled: bool = False):
        self.sender = sender
        self.enabled = enabled

    async def send(self, to: str | None, title: str, body: str) -> dict:
        if not self.enabled:
            logger.info("SMS disabled, message not sent", to=to, title=title)
            return {"message_id": None, "status": "failed", "error": "SMS disabled"}

        if not to:
            logger.warning("SMS not sent", title=title, error="No phone number provided")
            return {"message_id": None, "status": "failed", "error": "No phone number provided"}

        message_id = f"sms-{uuid4().hex[:12]}"
        logger.info("SMS sent", message_id=message_id, sender=self.sender, to=to, title=title, body=body)
        return {"message_id": message_id, "status": "sent"}
