from datetime import UTC, datetime

import pytest
from notifier.directory.product_vendor import link_vendor, vendor_ids_for_products
from notifier.directory.resolvers import DirectoryRecipientResolver, StaticRecipientResolver
from notifier.directory.user import UserAccount, UserRole, find_users, users_with_role
from protean import current_domain
from shared.contracts.ordering import Order, OrderItem


def _account(user_id, email, role=UserRole.CUSTOMER.value, **kwargs):
    account = UserAccount(id=user_id, email=email, role=role, **kwargs)
    current_domain.repository_for(UserAccount).add(account)
    return account


def _order(*product_ids):
    return Order(
        id="ord-1",
        order_number="SB-240101-0001",
        customer_id="cust-1",
        status="Pending",
        total_price=100.0,
        created_at=datetime(2024, 1, 1, 10, 0, tzinfo=UTC),
        items=[OrderItem(product_id=pid, name=f"Product {pid}", quantity=1) for pid in product_ids],
    )


class TestUserAccount:
    def test_display_name_prefers_first_name(self):
        assert UserAccount(email="jane@example.com", first_name="Jane").display_name == "Jane"

    def test_display_name_falls_back_to_email(self):
        assert UserAccount(email="sam.lee@example.com").display_name == "sam.lee"


class TestFindUsers:
    def test_keeps_request_order_and_drops_unknown(self):
        _account("u1", "one@example.com")
        _account("u2", "two@example.com")

        found = find_users(["u2", "ghost", "u1", "u2"])

        assert [str(u.id) for u in found] == ["u2", "u1"]

    def test_empty_input(self):
        assert find_users([]) == []
        assert find_users([None, ""]) == []


class TestRoles:
    def test_users_with_role_skips_inactive(self):
        _account("a1", "a1@example.com", role=UserRole.ADMIN.value)
        _account("a2", "a2@example.com", role=UserRole.ADMIN.value, is_active=False)
        _account("c1", "c1@example.com")

        assert [str(u.id) for u in users_with_role(UserRole.ADMIN.value)] == ["a1"]
        assert len(users_with_role(UserRole.ADMIN.value, active_only=False)) == 2


class TestProductVendors:
    def test_vendor_ids_are_deduplicated(self):
        link_vendor("p1", "v1")
        link_vendor("p2", "v1")
        link_vendor("p2", "v2")

        assert sorted(vendor_ids_for_products(["p1", "p2"])) == ["v1", "v2"]

    def test_no_products(self):
        assert vendor_ids_for_products([]) == []


class TestDirectoryRecipientResolver:
    @pytest.fixture
    def resolver(self):
        return DirectoryRecipientResolver()

    def test_resolve_admins(self, resolver):
        _account("a1", "a1@example.com", role=UserRole.ADMIN.value)
        _account("v1", "v1@example.com", role=UserRole.VENDOR.value)

        assert resolver.resolve_admins() == ["a1"]

    def test_resolve_vendors_for_product(self, resolver):
        link_vendor("p1", "v1")

        assert resolver.resolve_vendors_for_product("p1") == ["v1"]
        assert resolver.resolve_vendors_for_product(None) == []

    def test_resolve_vendors_for_order(self, resolver):
        link_vendor("p1", "v1")
        link_vendor("p2", "v2")

        assert sorted(resolver.resolve_vendors_for_order(_order("p1", "p2"))) == ["v1", "v2"]


class TestStaticRecipientResolver:
    def test_fixed_lists(self):
        resolver = StaticRecipientResolver(admins=["a1"], vendors_by_product={"p1": ["v1"], "p2": ["v1", "v2"]})

        assert resolver.resolve_admins() == ["a1"]
        assert resolver.resolve_vendors_for_product("p3") == []
        assert resolver.resolve_vendors_for_order(_order("p1", "p2")) == ["v1", "v2"]
