"""FastAPI routes for the Notifications domain.

Thin adapters that translate HTTP requests into repository queries and
domain commands. Every route acts on behalf of the authenticated caller.
"""

from fastapi import APIRouter, Depends, Query, Response
from notifications.api.dependencies import get_current_user_id
from notifications.api.schemas import (
    CountResponse,
    MarkReadRequest,
    MessageResponse,
    NotificationListResponse,
    NotificationResponse,
)
from notifications.notification.management import (
    DeleteNotification,
    MarkAllNotificationsRead,
    MarkNotificationRead,
)
from notifications.notification.notification import Notification
from protean.utils.globals import current_domain

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    user_id: str = Depends(get_current_user_id),
) -> NotificationListResponse:
    """List the caller's notifications, newest first."""
    repo = current_domain.repository_for(Notification)
    items, total = repo.list_for_user(user_id, limit=limit, offset=offset)
    return NotificationListResponse(
        notifications=[NotificationResponse.from_aggregate(n) for n in items],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/unread-count", response_model=CountResponse)
async def unread_count(user_id: str = Depends(get_current_user_id)) -> CountResponse:
    repo = current_domain.repository_for(Notification)
    return CountResponse(count=repo.count_unread(user_id))


@router.post(
    "/mark-read",
    response_model=NotificationResponse | CountResponse | MessageResponse,
)
async def mark_read(
    body: MarkReadRequest,
    user_id: str = Depends(get_current_user_id),
) -> NotificationResponse | CountResponse | MessageResponse:
    """Mark one notification, or all of the caller's notifications, as read."""
    if body.mark_all:
        count = current_domain.process(MarkAllNotificationsRead(user_id=user_id), asynchronous=False)
        return CountResponse(count=count)

    if body.notification_id:
        command = MarkNotificationRead(user_id=user_id, notification_id=body.notification_id)
        notification = current_domain.process(command, asynchronous=False)
        return NotificationResponse.from_aggregate(notification)

    return MessageResponse(message="No action taken. Provide notificationId or markAll: true.")


@router.delete("/{notification_id}", status_code=204)
async def delete_notification(notification_id: str, user_id: str = Depends(get_current_user_id)) -> Response:
    command = DeleteNotification(user_id=user_id, notification_id=notification_id)
    current_domain.process(command, asynchronous=False)
    return Response(status_code=204)
