"""Shared fixtures for the notifier tests.

Users live in the in-memory UserAccount store; recipients are resolved from a
StaticRecipientResolver so each test states exactly who the admins and
vendors are.
"""

import pytest
from notifier.channel import Channels
from notifier.channel.fake_email import FakeEmailAdapter
from notifier.channel.fake_sms import FakeSMSAdapter
from notifier.config import NotifierSettings
from notifier.directory.resolvers import StaticRecipientResolver
from notifier.directory.user import UserAccount, UserRole
from notifier.domain import notifier
from notifier.service import NotificationService
from protean import current_domain

CUSTOMER_ID = "cust-001"
OTHER_CUSTOMER_ID = "cust-002"
ADMIN_ID = "admin-001"
VENDOR_ID = "vendor-001"
SECOND_VENDOR_ID = "vendor-002"

PRODUCT_ID = "prod-roller-shade"


def make_user(user_id, email, role=UserRole.CUSTOMER.value, first_name=None, phone=None, is_active=True):
    user = UserAccount(
        id=user_id,
        email=email,
        first_name=first_name,
        phone=phone,
        role=role,
        is_active=is_active,
    )
    current_domain.repository_for(UserAccount).add(user)
    return user


@pytest.fixture
def users():
    return {
        CUSTOMER_ID: make_user(CUSTOMER_ID, "jane@example.com", first_name="Jane", phone="+15550001111"),
        OTHER_CUSTOMER_ID: make_user(OTHER_CUSTOMER_ID, "sam.lee@example.com"),
        ADMIN_ID: make_user(ADMIN_ID, "admin@smartblinds.com", role=UserRole.ADMIN.value, first_name="Ada"),
        VENDOR_ID: make_user(VENDOR_ID, "orders@shadeworks.com", role=UserRole.VENDOR.value, first_name="Vic"),
        SECOND_VENDOR_ID: make_user(SECOND_VENDOR_ID, "sales@blindco.com", role=UserRole.VENDOR.value),
    }


@pytest.fixture
def settings():
    return NotifierSettings(
        _env_file=None,
        EMAIL_BACKEND="fake",
        FRONTEND_URL="https://shop.test",
        CHANNEL_SEND_TIMEOUT=0.5,
    )


@pytest.fixture
def email_adapter():
    return FakeEmailAdapter()


@pytest.fixture
def sms_adapter():
    return FakeSMSAdapter()


@pytest.fixture
def resolver():
    return StaticRecipientResolver(
        admins=[ADMIN_ID],
        vendors_by_product={PRODUCT_ID: [VENDOR_ID]},
    )


@pytest.fixture
def service(settings, email_adapter, sms_adapter, resolver):
    svc = NotificationService(
        notifier,
        settings,
        channels=Channels(email=email_adapter, sms=sms_adapter),
        resolver=resolver,
    )
    svc.seed_types()
    return svc


@pytest.fixture
def dispatcher(service):
    return service.dispatcher


@pytest.fixture
def inbox(service):
    return service.inbox
