"""Inbound cross-service event handler: Notifications reacts to Campaign events.

Listens for CampaignStatusChanged (pauses only) and CampaignEnded.
"""

from notifications.domain import notifications
from notifications.notification.middleware import consumes
from notifications.notification.notification import Notification
from notifications.notification.routing import route_event
from protean.utils.mixins import handle
from shared.events.campaigns import CampaignEnded, CampaignStatusChanged

notifications.register_external_event(CampaignStatusChanged, "Campaigns.CampaignStatusChanged.v1")
notifications.register_external_event(CampaignEnded, "Campaigns.CampaignEnded.v1")


@notifications.event_handler(part_of=Notification, stream_category="campaigns::campaign")
class CampaignEventsHandler:
    """Reacts to campaign lifecycle changes."""

    @handle(CampaignStatusChanged)
    @consumes("campaign.status_changed")
    def on_campaign_status_changed(self, event: CampaignStatusChanged):
        return route_event("campaign.status_changed", event)

    @handle(CampaignEnded)
    @consumes("campaign.ended")
    def on_campaign_ended(self, event: CampaignEnded):
        """Record the end in the system inbox; the owner is not resolved here."""
        return route_event("campaign.ended", event)
