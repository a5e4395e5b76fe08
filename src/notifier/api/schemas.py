"""Pydantic request/response models for the notifier API.

API schemas are separate from the Protean aggregates (anti-corruption pattern).
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------
class PreferenceUpdate(BaseModel):
    id: str | None = Field(default=None, description="NotificationType id")
    in_app_enabled: bool | None = None
    email_enabled: bool | None = None
    sms_enabled: bool | None = None


class UpdatePreferencesRequest(BaseModel):
    preferences: list[PreferenceUpdate]


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class NotificationResponse(BaseModel):
    id: str
    title: str
    content: str
    type: str
    priority: str | None = None
    source_type: str | None = None
    source_id: str | None = None
    created_at: datetime | None = None
    is_read: bool
    read_at: datetime | None = None


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class NotificationListResponse(BaseModel):
    count: int
    pagination: Pagination
    data: list[NotificationResponse]


class UnreadCountResponse(BaseModel):
    count: int


class MarkAllReadResponse(BaseModel):
    status: str = "ok"
    updated: int


class PreferenceResponse(BaseModel):
    id: str
    name: str
    description: str
    category: str | None = None
    icon: str | None = None
    color: str | None = None
    in_app_enabled: bool
    email_enabled: bool
    sms_enabled: bool


class PreferencesResponse(BaseModel):
    preferences: list[PreferenceResponse]


class PreferenceUpdateResult(BaseModel):
    id: str
    success: bool
    message: str | None = None
    in_app_enabled: bool | None = None
    email_enabled: bool | None = None
    sms_enabled: bool | None = None


class UpdatePreferencesResponse(BaseModel):
    results: list[PreferenceUpdateResult]
