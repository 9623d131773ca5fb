"""Cross-service event contracts for Clip review events.

These classes define the event shape published by the clip review service
when a submitted clip is approved or rejected. They are registered as
external events via domain.register_external_event() with matching
__type__ strings so Protean's stream deserialization works correctly.
"""

from protean.core.event import BaseEvent
from protean.fields import Identifier, Integer, String


class ClipApproved(BaseEvent):
    """A clip passed review and earned a payout for its creator."""

    __version__ = 1

    clip_id = Identifier(required=True)
    campaign_id = Identifier(required=True)
    user_id = Identifier(required=True)
    payment_amount = Integer(required=True, min_value=0)  # minor units (cents)


class ClipRejected(BaseEvent):
    """A clip failed review."""

    __version__ = 1

    clip_id = Identifier(required=True)
    campaign_id = Identifier(required=True)
    user_id = Identifier(required=True)
    reason = String(required=True, max_length=1000)
