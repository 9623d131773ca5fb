"""Repository for the Notification aggregate: the user's inbox queries."""

from notifications.domain import notifications
from notifications.notification.notification import Notification


@notifications.repository(part_of=Notification)
class NotificationRepository:
    """Inbox queries on top of the standard add/get.

    Every query is scoped to a single user, so one user's notifications
    never leak into another user's listing or counts.
    """

    def list_for_user(self, user_id: str, limit: int = 20, offset: int = 0) -> tuple[list[Notification], int]:
        """Return one page of a user's notifications, newest first, plus the total."""
        result = (
            self._dao.query.filter(user_id=user_id)
            .order_by("-created_at")
            .offset(offset)
            .limit(limit)
            .all()
        )
        return result.items, result.total

    def count_unread(self, user_id: str) -> int:
        return self._dao.query.filter(user_id=user_id, is_read=False).all().total

    def unread_for_user(self, user_id: str) -> list[Notification]:
        total = self.count_unread(user_id)
        if total == 0:
            return []
        return self._dao.query.filter(user_id=user_id, is_read=False).limit(total).all().items
