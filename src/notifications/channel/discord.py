"""Discord channel: relays the notification as a DM via the discord service.

Best-effort: when no discord service URL is configured the channel is a
logged no-op, not a failure.
"""

import requests
import structlog
from notifications.channel.colors import color_for_type
from notifications.channel.port import ChannelDeliveryError, ChannelPort, DeliveryChannel, DeliveryPayload
from notifications.config import load_settings

logger = structlog.get_logger(__name__)

REQUEST_TIMEOUT_SECONDS = 5


def build_direct_message(payload: DeliveryPayload) -> dict:
    """Render the JSON body expected by ``POST /messages/dm``."""
    embed = {
        "title": payload.title,
        "description": payload.message or "",
        "color": color_for_type(payload.notification_type),
    }
    if payload.link:
        embed["fields"] = [{"name": "Link", "value": payload.link, "inline": False}]

    return {"userId": payload.user_id, "embed": embed}


class DiscordChannel(ChannelPort):
    name = DeliveryChannel.DISCORD.value

    def __init__(self, service_url: str | None = None):
        # None means "read DISCORD_SERVICE_URL at send time"
        self.service_url = service_url

    def _base_url(self) -> str | None:
        url = self.service_url if self.service_url is not None else load_settings().discord_service_url
        return url.rstrip("/") if url else None

    def send(self, payload: DeliveryPayload) -> None:
        base_url = self._base_url()
        if not base_url:
            logger.warning("Discord service URL not configured, skipping discord delivery", user_id=payload.user_id)
            return

        try:
            response = requests.post(
                f"{base_url}/messages/dm",
                json=build_direct_message(payload),
                timeout=REQUEST_TIMEOUT_SECONDS,
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error("Failed to deliver discord notification", user_id=payload.user_id, error=str(exc))
            raise ChannelDeliveryError(self.name, exc) from exc

        logger.debug(
            "Discord notification delivered",
            user_id=payload.user_id,
            notification_type=payload.notification_type,
        )
