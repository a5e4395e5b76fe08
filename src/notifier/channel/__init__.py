"""Channel adapters — email and SMS senders chosen from configuration.

In-app delivery has no adapter: a user receives it by being a recipient of
the persisted Notification.
"""

from dataclasses import dataclass

from notifier.channel.email_port import EmailPort
from notifier.channel.sms_port import SMSPort


@dataclass
class Channels:
    email: EmailPort
    sms: SMSPort


def build_channels(settings) -> Channels:
    """Construct the email and SMS adapters for ``settings``.

    ``EMAIL_BACKEND=fake`` swaps in the in-memory recorder (tests, local
    development without an SMTP relay). ``EMAIL_BACKEND=sendgrid`` sends
    through the SendGrid API instead of SMTP.
    """
    if settings.EMAIL_BACKEND == "fake":
        from notifier.channel.fake_email import FakeEmailAdapter

        email = FakeEmailAdapter()
    elif settings.EMAIL_BACKEND == "sendgrid":
        from notifier.channel.sendgrid_email import SendGridEmailAdapter

        email = SendGridEmailAdapter.from_settings(settings)
    else:
        from notifier.channel.smtp_email import SMTPEmailAdapter

        email = SMTPEmailAdapter.from_settings(settings)

    from notifier.channel.logging_sms import LoggingSMSAdapter

    sms = LoggingSMSAdapter(sender=settings.SMS_FROM, enabled=settings.SMS_ENABLED)

    return Channels(email=email, sms=sms)
