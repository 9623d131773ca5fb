"""Cross-service event contracts for clip Dispute events."""

from protean.core.event import BaseEvent
from protean.fields import Identifier, String


class DisputeCreated(BaseEvent):
    """A creator disputed a review decision on one of their clips."""

    __version__ = 1

    dispute_id = Identifier(required=True)
    clip_id = Identifier(required=True)
    campaign_id = Identifier()
    user_id = Identifier(required=True)


class DisputeResolved(BaseEvent):
    """A dispute was closed by a reviewer.

    ``status`` is ``RESOLVED`` when the dispute was upheld in the creator's
    favor; any other value means it was rejected.
    """

    __version__ = 1

    dispute_id = Identifier(required=True)
    clip_id = Identifier(required=True)
    user_id = Identifier(required=True)
    status = String(required=True, max_length=50)
    resolution = String(max_length=1000)
