"""Notifier bounded context — notification fan-out for the storefront.

Turns business events from ordering, fulfillment, inventory and customer
support into in-app notifications, emails and text messages. Resolves who
should hear about an event, honors each user's per-type channel preferences,
and tracks per-recipient read and email delivery state.
"""

import structlog
from protean.domain import Domain

notifier = Domain(name="notifier")

logger = structlog.get_logger(__name__)
