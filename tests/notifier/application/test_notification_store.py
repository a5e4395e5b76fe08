import asyncio
from datetime import UTC, datetime, timedelta

import pytest
from notifier.directory.user import UserAccount, UserRole, users_with_role
from notifier.notification.store import NotificationStore
from notifier.utils import db
from notifier.utils.db import fetch_all
from protean import current_domain

CUSTOMER_ID = "cust-001"


async def announce(dispatcher, message, **options):
    notification = await dispatcher.create_notification(
        "system_announcement", {"message": message}, None, [CUSTOMER_ID], **options
    )
    await asyncio.sleep(0.001)
    return notification


class TestInboxPage:
    @pytest.mark.asyncio
    async def test_page_is_sliced_by_the_query(self, dispatcher, users):
        for index in range(5):
            await announce(dispatcher, f"message {index}")

        entries, total = NotificationStore().inbox_page(CUSTOMER_ID, offset=2, limit=2)

        assert [entry.content for entry in entries] == ["message 2", "message 1"]
        assert total == 5

    @pytest.mark.asyncio
    async def test_expired_rows_are_not_counted(self, dispatcher, users):
        await announce(dispatcher, "expired", expires_at=datetime.now(UTC) - timedelta(minutes=5))
        await announce(dispatcher, "no expiry")
        await announce(dispatcher, "expires later", expires_at=datetime.now(UTC) + timedelta(days=1))

        entries, total = NotificationStore().inbox_page(CUSTOMER_ID, offset=0, limit=10)

        assert [entry.content for entry in entries] == ["expires later", "no expiry"]
        assert total == 2

    @pytest.mark.asyncio
    async def test_include_expired(self, dispatcher, users):
        await announce(dispatcher, "expired", expires_at=datetime.now(UTC) - timedelta(minutes=5))

        store = NotificationStore()
        assert store.inbox_entries(CUSTOMER_ID) == []
        assert [entry.content for entry in store.inbox_entries(CUSTOMER_ID, include_expired=True)] == ["expired"]

    @pytest.mark.asyncio
    async def test_unread_count(self, dispatcher, users):
        first = await announce(dispatcher, "one")
        await announce(dispatcher, "two")
        await announce(dispatcher, "gone", expires_at=datetime.now(UTC) - timedelta(minutes=5))

        store = NotificationStore()
        store.mark_read(first.id, CUSTOMER_ID)

        assert store.unread_count(CUSTOMER_ID) == 1


class TestFetchAll:
    def _admins(self, count):
        repo = current_domain.repository_for(UserAccount)
        for index in range(count):
            repo.add(UserAccount(id=f"admin-{index}", email=f"admin{index}@smartblinds.com", role=UserRole.ADMIN.value))

    @pytest.mark.parametrize("count", [0, 2, 5, 6])
    def test_reads_every_batch(self, count):
        self._admins(count)
        query = current_domain.repository_for(UserAccount)._dao.query

        assert len(fetch_all(query, batch_size=2)) == count

    def test_role_lookup_is_not_truncated(self, monkeypatch):
        monkeypatch.setattr(db, "QUERY_BATCH_SIZE", 3)
        self._admins(7)

        assert len(users_with_role(UserRole.ADMIN.value)) == 7
