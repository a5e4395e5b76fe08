"""Shared helpers for the notification builders."""

import functools
from datetime import UTC, date, datetime, timedelta

import structlog

logger = structlog.get_logger(__name__)


def best_effort(action: str):
    """Run a builder without letting its failure reach the caller.

    Any exception is logged with a traceback and the builder returns None, so
    the business action that triggered it always completes.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception:
                logger.exception("Failed to create notification", action=action)
                return None

        return wrapper

    return decorator


def format_date(value: date | datetime | None = None, days_from_now: int = 0) -> str:
    """``MM/DD/YYYY``; when ``value`` is None, today plus ``days_from_now``."""
    if value is None:
        value = datetime.now(UTC) + timedelta(days=days_from_now)
    return value.strftime("%m/%d/%Y")


def format_datetime(value: datetime | None = None) -> str:
    value = value or datetime.now(UTC)
    return value.strftime("%m/%d/%Y, %I:%M:%S %p")


def humanize_status(status: str | None) -> str:
    """``out_for_delivery`` → ``Out For Delivery``."""
    if not status:
        return ""
    return " ".join(word.capitalize() for word in status.split("_"))


def unique_ids(*groups, exclude=()) -> list[str]:
    """Flatten id groups, dropping blanks, duplicates and ``exclude``; order is kept."""
    excluded = {str(e) for e in exclude if e}
    ids = (str(i) for group in groups for i in (group or ()) if i)
    return [i for i in dict.fromkeys(ids) if i not in excluded]
