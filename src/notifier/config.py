"""Runtime settings for the notifier service.

Every value has a fallback so the service starts without any environment; the
SMTP defaults point at a Mailtrap sandbox.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class NotifierSettings(BaseSettings):
    # SMTP
    SMTP_HOST: str = "smtp.mailtrap.io"
    SMTP_PORT: int = 2525
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_STARTTLS: bool = False
    EMAIL_FROM: str = "notifications@smartblinds.com"

    # "fake" keeps emails in memory (development without a mail sandbox)
    EMAIL_BACKEND: Literal["smtp", "sendgrid", "fake"] = "smtp"

    # SendGrid (EMAIL_BACKEND=sendgrid)
    SENDGRID_API_KEY: str = ""

    # Absolute links in email bodies
    FRONTEND_URL: str = "http://localhost:3000"

    # SMS
    SMS_ENABLED: bool = False
    SMS_FROM: str = "+14155551234"

    SITE_NAME: str = "SmartBlinds"

    # Upper bound, in seconds, for a single channel send
    CHANNEL_SEND_TIMEOUT: float = 10.0

    # Insert missing default notification types when the service starts
    SEED_NOTIFICATION_TYPES: bool = True

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def smtp_authenticated(self) -> bool:
        """True when both SMTP credentials are present."""
        return bool(self.SMTP_USER and self.SMTP_PASSWORD)


@lru_cache
def get_settings() -> NotifierSettings:
    return NotifierSettings()
