"""FastAPI routes for the notification inbox.

Thin adapters over NotificationInbox. The caller is whoever the
``X-User-Id`` header names; authentication happens upstream.
"""

from fastapi import APIRouter, Depends
from protean.exceptions import ObjectNotFoundError

from notifier.api.dependencies import current_user_id, get_inbox
from notifier.api.schemas import (
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationResponse,
    PreferencesResponse,
    StatusResponse,
    UnreadCountResponse,
    UpdatePreferencesRequest,
    UpdatePreferencesResponse,
)
from notifier.notification.inbox import NotificationInbox

router = APIRouter(prefix="/notifications", tags=["notifications"])


# ---------------------------------------------------------------------------
# Inbox
# ---------------------------------------------------------------------------
@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    page: int = 1,
    limit: int = 10,
    read: bool | None = None,
    user_id: str = Depends(current_user_id),
    inbox: NotificationInbox = Depends(get_inbox),
) -> NotificationListResponse:
    """List the caller's notifications, newest first."""
    return NotificationListResponse(**inbox.get_user_notifications(user_id, page=page, limit=limit, read=read))


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(
    user_id: str = Depends(current_user_id),
    inbox: NotificationInbox = Depends(get_inbox),
) -> UnreadCountResponse:
    return UnreadCountResponse(count=inbox.get_unread_count(user_id))


@router.put("/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    user_id: str = Depends(current_user_id),
    inbox: NotificationInbox = Depends(get_inbox),
) -> MarkAllReadResponse:
    return MarkAllReadResponse(updated=inbox.mark_all_as_read(user_id))


# ---------------------------------------------------------------------------
# Preferences
# ---------------------------------------------------------------------------
@router.get("/preferences", response_model=PreferencesResponse)
async def get_preferences(
    user_id: str = Depends(current_user_id),
    inbox: NotificationInbox = Depends(get_inbox),
) -> PreferencesResponse:
    """Every configurable notification type with the caller's channel switches."""
    return PreferencesResponse(preferences=inbox.get_notification_preferences(user_id))


@router.put("/preferences", response_model=UpdatePreferencesResponse)
async def update_preferences(
    body: UpdatePreferencesRequest,
    user_id: str = Depends(current_user_id),
    inbox: NotificationInbox = Depends(get_inbox),
) -> UpdatePreferencesResponse:
    updates = [item.model_dump() for item in body.preferences]
    return UpdatePreferencesResponse(results=inbox.update_notification_preferences(user_id, updates))


# ---------------------------------------------------------------------------
# Single notification
# ---------------------------------------------------------------------------
@router.get("/{notification_id}", response_model=NotificationResponse)
async def get_notification(
    notification_id: str,
    user_id: str = Depends(current_user_id),
    inbox: NotificationInbox = Depends(get_inbox),
) -> NotificationResponse:
    """Fetch one notification; viewing it marks it read."""
    return NotificationResponse(**inbox.get_notification(user_id, notification_id))


@router.put("/{notification_id}/read", response_model=StatusResponse)
async def mark_read(
    notification_id: str,
    user_id: str = Depends(current_user_id),
    inbox: NotificationInbox = Depends(get_inbox),
) -> StatusResponse:
    """Mark one notification read for the caller.

    404 when it does not exist, the caller is not a recipient, or it was
    already read.
    """
    if not inbox.mark_as_read(notification_id, user_id):
        raise ObjectNotFoundError(f"Notification {notification_id} not found or already read")
    return StatusResponse()
