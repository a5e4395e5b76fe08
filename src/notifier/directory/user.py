"""UserAccount aggregate — local read-model of the storefront's users.

Accounts are owned by the authentication service and mirrored here so the
notifier can look up contact details and roles without calling out.
"""

from enum import Enum

import structlog
from protean.fields import Boolean, String
from protean.utils.globals import current_domain

from notifier.domain import notifier
from notifier.utils.db import fetch_all

logger = structlog.get_logger(__name__)


class UserRole(Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"
    VENDOR = "vendor"
    SALES = "sales"
    INSTALLER = "installer"


@notifier.aggregate
class UserAccount:
    email: String(required=True, max_length=254)
    first_name: String(max_length=100)
    last_name: String(max_length=100)
    phone: String(max_length=30)
    role: String(choices=UserRole, default=UserRole.CUSTOMER.value)
    is_active: Boolean(default=True)

    @property
    def display_name(self) -> str:
        """First name, falling back to the local part of the email address."""
        if self.first_name:
            return self.first_name
        return (self.email or "").split("@")[0]


def find_users(user_ids) -> list[UserAccount]:
    """Fetch the accounts for ``user_ids`` in one query.

    Unknown ids are dropped. Duplicates in ``user_ids`` collapse to one
    account. The result follows the order of first appearance in ``user_ids``.
    """
    ordered_ids = list(dict.fromkeys(str(user_id) for user_id in user_ids if user_id))
    if not ordered_ids:
        return []

    repo = current_domain.repository_for(UserAccount)
    found = repo._dao.query.filter(id__in=ordered_ids).limit(len(ordered_ids)).all().items
    by_id = {str(user.id): user for user in found}

    missing = [user_id for user_id in ordered_ids if user_id not in by_id]
    if missing:
        logger.debug("Skipping unknown notification recipients", user_ids=missing)

    return [by_id[user_id] for user_id in ordered_ids if user_id in by_id]


def users_with_role(role: str, active_only: bool = True) -> list[UserAccount]:
    query = current_domain.repository_for(UserAccount)._dao.query.filter(role=role)
    if active_only:
        query = query.filter(is_active=True)
    return fetch_all(query)
