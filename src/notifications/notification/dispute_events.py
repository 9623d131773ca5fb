"""Inbound cross-service event handler: Notifications reacts to Dispute events."""

from notifications.domain import notifications
from notifications.notification.middleware import consumes
from notifications.notification.notification import Notification
from notifications.notification.routing import route_event
from protean.utils.mixins import handle
from shared.events.disputes import DisputeCreated, DisputeResolved

notifications.register_external_event(DisputeCreated, "Disputes.DisputeCreated.v1")
notifications.register_external_event(DisputeResolved, "Disputes.DisputeResolved.v1")


@notifications.event_handler(part_of=Notification, stream_category="disputes::dispute")
class DisputeEventsHandler:
    """Keeps creators informed while a dispute is open and once it closes."""

    @handle(DisputeCreated)
    @consumes("dispute.created")
    def on_dispute_created(self, event: DisputeCreated):
        return route_event("dispute.created", event)

    @handle(DisputeResolved)
    @consumes("dispute.resolved")
    def on_dispute_resolved(self, event: DisputeResolved):
        return route_event("dispute.resolved", event)
