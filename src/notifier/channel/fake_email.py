"""Fake email adapter — records sent emails for testing."""

import asyncio
from uuid import uuid4

from notifier.channel.email_port import EmailPort


class FakeEmailAdapter(EmailPort):
    """Email adapter that records messages in memory for test assertions.

    ``delays`` maps a recipient address to seconds to wait before answering,
    and ``failing`` holds addresses that always fail. Together they let tests
    control the order in which concurrent sends complete.
    """

    def __init__(self):
        self.sent_emails: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
        self.delays: dict[str, float] = {}
        self.failing: set[str] = set()

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str = "Email delivery failed",
        delays: dict[str, float] | None = None,
        failing=None,
    ):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.delays = dict(delays or {})
        self.failing = set(failing or ())

    async def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> dict:
        delay = self.delays.get(to)
        if delay:
            await asyncio.sleep(delay)

        if not self.should_succeed or to in self.failing:
            return {
                "message_id": None,
                "status": "failed",
                "error": self.failure_reason,
            }

        message_id = f"email-{uuid4().hex[:12]}"
        record = {
            "message_id": message_id,
            "to": to,
            "subject": subject,
            "body": body,
            "html_body": html_body,
        }
        self.sent_emails.append(record)

        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        """Clear sent emails (useful between tests)."""
        self.sent_emails.clear()
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
        self.delays.clear()
        self.failing.clear()
