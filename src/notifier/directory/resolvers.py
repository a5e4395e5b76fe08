"""Recipient resolvers — who should hear about a business event.

Builders never embed user ids. They ask a resolver, which is injected when the
NotificationService is assembled.
"""

from abc import ABC, abstractmethod

from notifier.directory.product_vendor import vendor_ids_for_products
from notifier.directory.user import UserRole, users_with_role


class RecipientResolver(ABC):
    """Abstract interface for recipient lookups."""

    @abstractmethod
    def resolve_admins(self) -> list[str]: ...

    @abstractmethod
    def resolve_vendors_for_product(self, product_id) -> list[str]: ...

    @abstractmethod
    def resolve_vendors_for_order(self, order) -> list[str]: ...


class DirectoryRecipientResolver(RecipientResolver):
    """Resolves recipients from the UserAccount and ProductVendor stores."""

    def resolve_admins(self) -> list[str]:
        return [str(user.id) for user in users_with_role(UserRole.ADMIN.value)]

    def resolve_vendors_for_product(self, product_id) -> list[str]:
        if not product_id:
            return []
        return vendor_ids_for_products([product_id])

    def resolve_vendors_for_order(self, order) -> list[str]:
        return vendor_ids_for_products(order.product_ids)


class StaticRecipientResolver(RecipientResolver):
    """Fixed recipient lists, for tests and local development."""

    def __init__(self, admins=None, vendors_by_product=None):
        self.admins = list(admins or [])
        self.vendors_by_product = {str(k): list(v) for k, v in (vendors_by_product or {}).items()}

    def resolve_admins(self) -> list[str]:
        return list(self.admins)

    def resolve_vendors_for_product(self, product_id) -> list[str]:
        return list(self.vendors_by_product.get(str(product_id), []))

    def resolve_vendors_for_order(self, order) -> list[str]:
        vendor_ids = []
        for product_id in order.product_ids:
            vendor_ids.extend(self.resolve_vendors_for_product(product_id))
        return list(dict.fromkeys(vendor_ids))
