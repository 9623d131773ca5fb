"""Inbound cross-service event handler: Notifications reacts to Clip review events.

Listens for ClipApproved (earnings notice) and ClipRejected (rejection reason).
"""

from notifications.domain import notifications
from notifications.notification.middleware import consumes
from notifications.notification.notification import Notification
from notifications.notification.routing import route_event
from protean.utils.mixins import handle
from shared.events.clips import ClipApproved, ClipRejected

notifications.register_external_event(ClipApproved, "Clips.ClipApproved.v1")
notifications.register_external_event(ClipRejected, "Clips.ClipRejected.v1")


@notifications.event_handler(part_of=Notification, stream_category="clips::clip")
class ClipEventsHandler:
    """Reacts to clip review decisions to notify the clip's creator."""

    @handle(ClipApproved)
    @consumes("clip.approved")
    def on_clip_approved(self, event: ClipApproved):
        return route_event("clip.approved", event)

    @handle(ClipRejected)
    @consumes("clip.rejected")
    def on_clip_rejected(self, event: ClipRejected):
        return route_event("clip.rejected", event)
