"""Tests for the small helpers shared by the notification builders."""

from datetime import date, datetime

import pytest
from notifier.notification.helpers import best_effort, format_date, format_datetime, humanize_status, unique_ids


class TestHumanizeStatus:
    @pytest.mark.parametrize(
        "status, expected",
        [
            ("out_for_delivery", "Out For Delivery"),
            ("delivered", "Delivered"),
            ("in_transit", "In Transit"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_humanize(self, status, expected):
        assert humanize_status(status) == expected


class TestUniqueIds:
    def test_keeps_first_occurrence_order(self):
        assert unique_ids(["a", "b"], ["b", "c"], ["a"]) == ["a", "b", "c"]

    def test_drops_blanks_and_none_groups(self):
        assert unique_ids(["a", None, ""], None, [None]) == ["a"]

    def test_excludes_ids(self):
        assert unique_ids(["a", "b", "c"], exclude=["b"]) == ["a", "c"]


class TestFormatting:
    def test_format_date(self):
        assert format_date(date(2024, 1, 5)) == "01/05/2024"

    def test_format_date_defaults_to_offset_from_today(self):
        assert len(format_date(None, days_from_now=7)) == len("01/05/2024")

    def test_format_datetime(self):
        assert format_datetime(datetime(2024, 1, 5, 14, 30, 0)) == "01/05/2024, 02:30:00 PM"


class TestBestEffort:
    @pytest.mark.asyncio
    async def test_returns_result(self):
        @best_effort("demo")
        async def builder():
            return "ok"

        assert await builder() == "ok"

    @pytest.mark.asyncio
    async def test_swallows_and_returns_none(self):
        @best_effort("demo")
        async def builder():
            raise RuntimeError("database down")

        assert await builder() is None
