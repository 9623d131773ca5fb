"""In-app channel: writes the notification into the user's inbox."""

import structlog
from notifications.channel.port import ChannelDeliveryError, ChannelPort, DeliveryChannel, DeliveryPayload
from notifications.notification.helpers import create_notification

logger = structlog.get_logger(__name__)


class InAppChannel(ChannelPort):
    name = DeliveryChannel.IN_APP.value

    def send(self, payload: DeliveryPayload) -> None:
        try:
            create_notification(
                user_id=payload.user_id,
                notification_type=payload.notification_type,
                title=payload.title,
                message=payload.message,
                link=payload.link,
                metadata=payload.metadata,
            )
        except Exception as exc:
            raise ChannelDeliveryError(self.name, exc) from exc

        logger.debug(
            "In-app notification delivered",
            user_id=payload.user_id,
            notification_type=payload.notification_type,
        )
