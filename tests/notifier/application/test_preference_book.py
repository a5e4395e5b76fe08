import pytest
from notifier.preference.preference import ChannelPreference, PreferenceBook, UserNotificationPreference
from protean import current_domain
from protean.exceptions import ValidationError

TYPE_ID = "type-order-confirmation"
OTHER_TYPE_ID = "type-order-shipped"


@pytest.fixture
def book():
    return PreferenceBook()


def _stored():
    return current_domain.repository_for(UserNotificationPreference)._dao.query.all().items


class TestForUsers:
    def test_defaults_without_records(self, book):
        prefs = book.for_users(["u1", "u2"], TYPE_ID)

        assert prefs == {"u1": ChannelPreference.default(), "u2": ChannelPreference.default()}
        assert prefs["u1"].in_app is True
        assert prefs["u1"].email is True
        assert prefs["u1"].sms is False

    def test_stored_records_override_defaults(self, book):
        book.upsert("u1", TYPE_ID, email=False, sms=True)

        prefs = book.for_users(["u1", "u2"], TYPE_ID)

        assert prefs["u1"] == ChannelPreference(in_app=True, email=False, sms=True)
        assert prefs["u2"] == ChannelPreference.default()

    def test_records_for_other_types_are_ignored(self, book):
        book.upsert("u1", OTHER_TYPE_ID, in_app=False)

        assert book.for_users(["u1"], TYPE_ID)["u1"] == ChannelPreference.default()

    def test_empty_user_list(self, book):
        assert book.for_users([], TYPE_ID) == {}


class TestUpsert:
    def test_first_edit_creates_record(self, book):
        preference = book.upsert("u1", TYPE_ID, sms=True)

        assert preference.in_app_enabled is True
        assert preference.email_enabled is True
        assert preference.sms_enabled is True
        assert len(_stored()) == 1

    def test_second_edit_updates_in_place(self, book):
        book.upsert("u1", TYPE_ID, sms=True)
        preference = book.upsert("u1", TYPE_ID, email=False)

        assert len(_stored()) == 1
        assert preference.email_enabled is False
        assert preference.sms_enabled is True

    def test_update_without_flags_is_rejected(self, book):
        book.upsert("u1", TYPE_ID, sms=True)

        with pytest.raises(ValidationError):
            book.upsert("u1", TYPE_ID)

    def test_one_record_per_user_and_type(self, book):
        book.upsert("u1", TYPE_ID, sms=True)
        book.upsert("u1", OTHER_TYPE_ID, sms=True)
        book.upsert("u2", TYPE_ID, sms=True)

        assert len(_stored()) == 3


class TestForUser:
    def test_keyed_by_type_id(self, book):
        book.upsert("u1", TYPE_ID, sms=True)
        book.upsert("u1", OTHER_TYPE_ID, in_app=False)
        book.upsert("u2", TYPE_ID, email=False)

        stored = book.for_user("u1")

        assert set(stored) == {TYPE_ID, OTHER_TYPE_ID}
        assert stored[OTHER_TYPE_ID].in_app_enabled is False

    def test_find_missing_returns_none(self, book):
        assert book.find("u1", TYPE_ID) is None
