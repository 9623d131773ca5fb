"""Inbound cross-service event handler: Notifications reacts to Payment events.

Listens for PayoutCompleted to tell creators their money has settled.
"""

from notifications.domain import notifications
from notifications.notification.middleware import consumes
from notifications.notification.notification import Notification
from notifications.notification.routing import route_event
from protean.utils.mixins import handle
from shared.events.payments import PayoutCompleted

notifications.register_external_event(PayoutCompleted, "Payments.PayoutCompleted.v1")


@notifications.event_handler(part_of=Notification, stream_category="payments::payout")
class PayoutEventsHandler:
    @handle(PayoutCompleted)
    @consumes("payment.payout_completed")
    def on_payout_completed(self, event: PayoutCompleted):
        return route_event("payment.payout_completed", event)
