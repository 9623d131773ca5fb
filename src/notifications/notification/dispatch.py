"""Delivery coordinator: fans one notification out across channels.

Channels are attempted one after another, in the requested order. A channel
that fails (or is not known) is recorded as a failed outcome and the
remaining channels are still attempted. Nothing is retried here; retrying
belongs to the event-handler middleware and to broker redelivery.
"""

import structlog
from notifications.channel import get_channel
from notifications.channel.port import ChannelDeliveryError, DeliveryOutcome, DeliveryPayload, UnknownChannelError

logger = structlog.get_logger(__name__)


def deliver(payload: DeliveryPayload, channels: list[str]) -> list[DeliveryOutcome]:
    """Attempt every channel and return one outcome per channel, in order.

    Never raises for a channel failure: even when every channel fails the
    caller gets the full list of outcomes.
    """
    return [_deliver_via_channel(payload, channel) for channel in channels]


def _deliver_via_channel(payload: DeliveryPayload, channel: str) -> DeliveryOutcome:
    try:
        adapter = get_channel(channel)
        adapter.send(payload)
    except UnknownChannelError as exc:
        logger.warning("Unknown delivery channel", channel=channel)
        return DeliveryOutcome(channel=channel, success=False, error=str(exc))
    except ChannelDeliveryError as exc:
        logger.error("Delivery failed", channel=channel, user_id=payload.user_id, error=str(exc))
        return DeliveryOutcome(channel=channel, success=False, error=str(exc.cause) or str(exc))
    except Exception as exc:
        logger.exception("Delivery failed unexpectedly", channel=channel, user_id=payload.user_id)
        return DeliveryOutcome(channel=channel, success=False, error=str(exc) or type(exc).__name__)

    return DeliveryOutcome(channel=channel, success=True)
