"""Inbox management commands + handler: mark read, mark all read, delete.

Each command carries the calling user's id; the handler enforces that only
the owner of a notification may change or remove it.
"""

import structlog
from notifications.domain import notifications
from notifications.notification.notification import Notification
from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

logger = structlog.get_logger(__name__)


@notifications.command(part_of="Notification")
class MarkNotificationRead:
    """Mark one of the caller's notifications as read."""

    user_id: Identifier(required=True)
    notification_id: Identifier(required=True)


@notifications.command(part_of="Notification")
class MarkAllNotificationsRead:
    """Mark every unread notification of the caller as read."""

    user_id: Identifier(required=True)


@notifications.command(part_of="Notification")
class DeleteNotification:
    """Remove one of the caller's notifications."""

    user_id: Identifier(required=True)
    notification_id: Identifier(required=True)


@notifications.command_handler(part_of=Notification)
class InboxManagementHandler:
    @handle(MarkNotificationRead)
    def mark_read(self, command: MarkNotificationRead) -> Notification:
        repo = current_domain.repository_for(Notification)
        notification = repo.get(command.notification_id)
        notification.ensure_owned_by(command.user_id, "mark as read")

        notification.mark_read()
        repo.add(notification)
        return notification

    @handle(MarkAllNotificationsRead)
    def mark_all_read(self, command: MarkAllNotificationsRead) -> int:
        repo = current_domain.repository_for(Notification)

        unread = repo.unread_for_user(command.user_id)
        for notification in unread:
            notification.mark_read()
            repo.add(notification)

        logger.info("Marked all notifications as read", user_id=str(command.user_id), count=len(unread))
        return len(unread)

    @handle(DeleteNotification)
    def delete_notification(self, command: DeleteNotification) -> None:
        repo = current_domain.repository_for(Notification)
        notification = repo.get(command.notification_id)
        notification.ensure_owned_by(command.user_id, "delete")

        repo._dao.delete(notification)
        logger.info(
            "Notification deleted",
            notification_id=str(command.notification_id),
            user_id=str(command.user_id),
        )
