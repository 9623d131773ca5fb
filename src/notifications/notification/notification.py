"""Notification aggregate: one entry in a user's inbox.

Notifications are created by the delivery path (the in-app channel) from
inbound domain events. After creation only the read flag changes, and only
the owning user may flip it or delete the notification. There is no
automatic expiry.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from notifications.domain import notifications
from notifications.notification.events import NotificationCreated, NotificationRead
from protean.fields import Boolean, DateTime, Identifier, String, Text


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class NotificationType(Enum):
    CLIP_APPROVED = "CLIP_APPROVED"
    CLIP_REJECTED = "CLIP_REJECTED"
    CAMPAIGN_ACCEPTED = "CAMPAIGN_ACCEPTED"
    CAMPAIGN_REJECTED = "CAMPAIGN_REJECTED"
    CAMPAIGN_ENDING = "CAMPAIGN_ENDING"
    CAMPAIGN_ENDED = "CAMPAIGN_ENDED"
    NEW_CAMPAIGN = "NEW_CAMPAIGN"
    STUDIO_INVITE = "STUDIO_INVITE"
    CLIP_MILESTONE = "CLIP_MILESTONE"
    PAYMENT_COMPLETED = "PAYMENT_COMPLETED"
    PAYMENT_CREDITED = "PAYMENT_CREDITED"
    PAYMENT_PROCESSING = "PAYMENT_PROCESSING"
    PAYMENT_ERROR = "PAYMENT_ERROR"
    SYSTEM_ALERT = "SYSTEM_ALERT"
    DISCORD_DISCONNECTED = "DISCORD_DISCONNECTED"
    WALLET_NOT_CONFIGURED = "WALLET_NOT_CONFIGURED"
    PROFILE_INCOMPLETE = "PROFILE_INCOMPLETE"


class ForbiddenError(Exception):
    """The caller tried to act on a notification owned by someone else."""


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@notifications.aggregate
class Notification:
    """A single user-facing notification.

    ``metadata_json`` holds the opaque, event-specific payload as JSON text;
    it is stored and returned but never interpreted here. ``user_id`` is
    never reassigned after creation.
    """

    user_id: Identifier(required=True)
    notification_type: String(choices=NotificationType, required=True)

    # Content
    title: String(required=True, max_length=255)
    message: Text()
    link: String(max_length=2048)
    metadata_json: Text()

    # Read state
    is_read: Boolean(default=False)
    read_at: DateTime()

    created_at: DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        user_id,
        notification_type,
        title,
        message=None,
        link=None,
        metadata=None,
        created_at=None,
    ):
        """Create a new, unread notification."""
        now = created_at or datetime.now(UTC)

        notification = cls(
            user_id=user_id,
            notification_type=notification_type,
            title=title,
            message=message,
            link=link,
            metadata_json=json.dumps(metadata) if metadata is not None else None,
            is_read=False,
            created_at=now,
        )

        notification.raise_(
            NotificationCreated(
                notification_id=str(notification.id),
                user_id=str(user_id),
                notification_type=notification_type,
                title=title,
                created_at=now,
            )
        )

        return notification

    # -------------------------------------------------------------------
    # Behaviour
    # -------------------------------------------------------------------
    def ensure_owned_by(self, user_id, action="modify"):
        if str(self.user_id) != str(user_id):
            raise ForbiddenError(f"Cannot {action} another user's notification")

    def mark_read(self, read_at=None):
        """Flag the notification as read. Marking twice is a no-op."""
        if self.is_read:
            return

        now = read_at or datetime.now(UTC)
        self.is_read = True
        self.read_at = now

        self.raise_(
            NotificationRead(
                notification_id=str(self.id),
                user_id=str(self.user_id),
                read_at=now,
            )
        )
