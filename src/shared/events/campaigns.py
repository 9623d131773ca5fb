"""Cross-service event contracts for Campaign lifecycle events."""

from protean.core.event import BaseEvent
from protean.fields import Identifier, Integer, String


class CampaignStatusChanged(BaseEvent):
    """A campaign moved between lifecycle states (ACTIVE, PAUSED, ...)."""

    __version__ = 1

    campaign_id = Identifier(required=True)
    old_status = String(max_length=50)
    new_status = String(required=True, max_length=50)
    changed_by = Identifier()  # Absent for system-driven transitions


class CampaignEnded(BaseEvent):
    """A campaign finished, either by budget exhaustion, schedule or manually."""

    __version__ = 1

    campaign_id = Identifier(required=True)
    end_reason = String(required=True, max_length=200)
    total_clips = Integer(default=0)
    total_views = Integer(default=0)
