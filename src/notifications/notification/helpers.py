"""Shared helpers for writing notifications into a user's inbox."""

import structlog
from notifications.notification.notification import Notification
from protean.utils.globals import current_domain

logger = structlog.get_logger(__name__)


def create_notification(
    user_id: str,
    notification_type: str,
    title: str,
    message: str | None = None,
    link: str | None = None,
    metadata: dict | None = None,
) -> Notification:
    """Persist a new unread notification for ``user_id`` and return it.

    Not idempotent: calling twice for the same source event stores two
    notifications.
    """
    notification = Notification.create(
        user_id=user_id,
        notification_type=notification_type,
        title=title,
        message=message,
        link=link,
        metadata=metadata,
    )
    current_domain.repository_for(Notification).add(notification)

    logger.info(
        "Notification created",
        notification_id=str(notification.id),
        user_id=str(user_id),
        notification_type=notification_type,
    )

    return notification
