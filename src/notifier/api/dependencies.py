"""Request-scoped dependencies for the notifier routes."""

from fastapi import Header, Request

from notifier.notification.inbox import NotificationInbox


def current_user_id(x_user_id: str = Header(..., description="Authenticated user id")) -> str:
    """The caller, as identified by the gateway in front of this service."""
    return x_user_id


def get_inbox(request: Request) -> NotificationInbox:
    return request.app.state.notifications.inbox
