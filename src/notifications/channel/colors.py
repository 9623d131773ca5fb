"""Embed colours per notification type, used by the Discord channel."""

from notifications.notification.notification import NotificationType

GREEN = 0x22C55E
RED = 0xEF4444
AMBER = 0xF59E0B
BLUE = 0x3B82F6
GRAY = 0x6B7280

COLOR_BY_TYPE: dict[str, int] = {
    NotificationType.CLIP_APPROVED.value: GREEN,
    NotificationType.CAMPAIGN_ACCEPTED.value: GREEN,
    NotificationType.PAYMENT_COMPLETED.value: GREEN,
    NotificationType.PAYMENT_CREDITED.value: GREEN,
    NotificationType.CLIP_REJECTED.value: RED,
    NotificationType.CAMPAIGN_REJECTED.value: RED,
    NotificationType.PAYMENT_ERROR.value: RED,
    NotificationType.CAMPAIGN_ENDING.value: AMBER,
    NotificationType.CAMPAIGN_ENDED.value: AMBER,
    NotificationType.PAYMENT_PROCESSING.value: AMBER,
    NotificationType.NEW_CAMPAIGN.value: BLUE,
    NotificationType.STUDIO_INVITE.value: BLUE,
    NotificationType.CLIP_MILESTONE.value: BLUE,
}


def color_for_type(notification_type: str) -> int:
    """Look up the embed colour; system and account notices fall back to gray."""
    return COLOR_BY_TYPE.get(notification_type, GRAY)
