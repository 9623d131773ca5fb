"""Pydantic request/response models for the Notifications API.

API schemas are separate from Protean commands (anti-corruption pattern).
JSON keys are camelCase on the wire; request bodies also accept snake_case.
"""

import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------
class MarkReadRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"examples": [{"notificationId": "0b6c3c52-2f0e-4bb0-a51c-3d1e2c1a9f10"}, {"markAll": True}]},
    )

    notification_id: str | None = Field(None, max_length=255)
    mark_all: bool | None = None


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------
class NotificationResponse(CamelModel):
    id: str
    user_id: str
    type: str
    title: str
    message: str | None = None
    link: str | None = None
    metadata: dict[str, Any] | None = None
    is_read: bool
    created_at: datetime | None = None
    read_at: datetime | None = None

    @classmethod
    def from_aggregate(cls, notification) -> "NotificationResponse":
        return cls(
            id=str(notification.id),
            user_id=str(notification.user_id),
            type=notification.notification_type,
            title=notification.title,
            message=notification.message,
            link=notification.link,
            metadata=json.loads(notification.metadata_json) if notification.metadata_json else None,
            is_read=bool(notification.is_read),
            created_at=notification.created_at,
            read_at=notification.read_at,
        )


class NotificationListResponse(CamelModel):
    notifications: list[NotificationResponse]
    total: int
    limit: int
    offset: int


class CountResponse(CamelModel):
    count: int


class MessageResponse(CamelModel):
    message: str
