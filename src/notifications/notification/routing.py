"""Event routing: maps inbound domain events to notification payloads.

Every supported routing key has exactly one Route: the external event type
it carries, a pure mapping function that turns the event into a
DeliveryPayload (or None when the event should not notify anyone), and the
channels to deliver through. Mapping functions touch no infrastructure, so
they can be exercised without a broker or a database.
"""

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

import structlog
from notifications.channel.port import ChannelDeliveryError, DeliveryChannel, DeliveryOutcome, DeliveryPayload
from notifications.notification.dispatch import deliver
from notifications.notification.notification import NotificationType
from shared.events.campaigns import CampaignEnded, CampaignStatusChanged
from shared.events.clips import ClipApproved, ClipRejected
from shared.events.disputes import DisputeCreated, DisputeResolved
from shared.events.payments import PayoutCompleted

logger = structlog.get_logger(__name__)

# Campaign owners are not resolved yet, so campaign-wide notices go to this
# inbox instead of guessing a recipient.
SYSTEM_ACTOR = "system"

DEFAULT_CHANNELS = (DeliveryChannel.IN_APP.value,)


def format_amount(minor_units: int) -> str:
    """Render an amount in cents as dollars, e.g. 2550 -> "$25.50"."""
    return f"${Decimal(minor_units) / 100:.2f}"


# ---------------------------------------------------------------------------
# Mapping functions
# ---------------------------------------------------------------------------
def clip_approved(event: ClipApproved) -> DeliveryPayload:
    return DeliveryPayload(
        user_id=str(event.user_id),
        notification_type=NotificationType.CLIP_APPROVED.value,
        title="Clip Approved",
        message=f"Your clip has been approved! You earned {format_amount(event.payment_amount)}.",
        metadata={
            "clip_id": str(event.clip_id),
            "campaign_id": str(event.campaign_id),
            "payment_amount": event.payment_amount,
        },
    )


def clip_rejected(event: ClipRejected) -> DeliveryPayload:
    return DeliveryPayload(
        user_id=str(event.user_id),
        notification_type=NotificationType.CLIP_REJECTED.value,
        title="Clip Rejected",
        message=f"Your clip was rejected. Reason: {event.reason}",
        metadata={
            "clip_id": str(event.clip_id),
            "campaign_id": str(event.campaign_id),
            "reason": event.reason,
        },
    )


def campaign_status_changed(event: CampaignStatusChanged) -> DeliveryPayload | None:
    """Only a pause initiated by a known user notifies; other transitions are silent."""
    if event.new_status != "PAUSED" or not event.changed_by:
        return None

    return DeliveryPayload(
        user_id=str(event.changed_by),
        notification_type=NotificationType.CAMPAIGN_ENDING.value,
        title="Campaign Paused",
        message="Campaign has been paused.",
        metadata={
            "campaign_id": str(event.campaign_id),
            "old_status": event.old_status,
            "new_status": event.new_status,
        },
    )


def campaign_ended(event: CampaignEnded) -> DeliveryPayload:
    return DeliveryPayload(
        user_id=SYSTEM_ACTOR,
        notification_type=NotificationType.SYSTEM_ALERT.value,
        title="Campaign Ended",
        message=(
            f"Campaign ended ({event.end_reason}). "
            f"Total clips: {event.total_clips}, Total views: {event.total_views}."
        ),
        metadata={
            "campaign_id": str(event.campaign_id),
            "end_reason": event.end_reason,
            "total_clips": event.total_clips,
            "total_views": event.total_views,
        },
    )


def payout_completed(event: PayoutCompleted) -> DeliveryPayload:
    return DeliveryPayload(
        user_id=str(event.user_id),
        notification_type=NotificationType.PAYMENT_COMPLETED.value,
        title="Payment Completed",
        message=f"Your payout of {format_amount(event.amount)} has been completed.",
        metadata={
            "payout_id": str(event.payout_id),
            "amount": event.amount,
            "transaction_hash": event.transaction_hash,
        },
    )


def dispute_created(event: DisputeCreated) -> DeliveryPayload:
    return DeliveryPayload(
        user_id=str(event.user_id),
        notification_type=NotificationType.SYSTEM_ALERT.value,
        title="Dispute Created",
        message="Your dispute has been submitted and is under review.",
        metadata={
            "dispute_id": str(event.dispute_id),
            "clip_id": str(event.clip_id),
            "campaign_id": str(event.campaign_id) if event.campaign_id else None,
        },
    )


def dispute_resolved(event: DisputeResolved) -> DeliveryPayload:
    outcome = "resolved in your favor" if event.status == "RESOLVED" else "rejected"
    return DeliveryPayload(
        user_id=str(event.user_id),
        notification_type=NotificationType.SYSTEM_ALERT.value,
        title="Dispute Resolved",
        message=f"Your dispute has been {outcome}. Resolution: {event.resolution}",
        metadata={
            "dispute_id": str(event.dispute_id),
            "clip_id": str(event.clip_id),
            "status": event.status,
            "resolution": event.resolution,
        },
    )


# ---------------------------------------------------------------------------
# Routing table
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Route:
    routing_key: str
    event_type: str
    event_cls: type
    build: Callable[..., DeliveryPayload | None]
    channels: tuple[str, ...] = DEFAULT_CHANNELS


ROUTES: dict[str, Route] = {
    route.routing_key: route
    for route in (
        Route("clip.approved", "Clips.ClipApproved.v1", ClipApproved, clip_approved),
        Route("clip.rejected", "Clips.ClipRejected.v1", ClipRejected, clip_rejected),
        Route(
            "campaign.status_changed",
            "Campaigns.CampaignStatusChanged.v1",
            CampaignStatusChanged,
            campaign_status_changed,
        ),
        Route("campaign.ended", "Campaigns.CampaignEnded.v1", CampaignEnded, campaign_ended),
        Route("payment.payout_completed", "Payments.PayoutCompleted.v1", PayoutCompleted, payout_completed),
        Route("dispute.resolved", "Disputes.DisputeResolved.v1", DisputeResolved, dispute_resolved),
        Route("dispute.created", "Disputes.DisputeCreated.v1", DisputeCreated, dispute_created),
    )
}

ROUTING_KEYS: tuple[str, ...] = tuple(ROUTES)


def route_event(routing_key: str, event) -> list[DeliveryOutcome]:
    """Map the event through its route and deliver the result.

    Delivery failures are logged and reported in the returned outcomes.
    A failed in-app write means the store itself is in trouble: it is
    logged at error level and raised, so the handler middleware retries
    the event and applies the acknowledgement policy. Failures on other
    channels are best-effort and only log a warning.

    Raises:
        ChannelDeliveryError: the in-app channel could not store the
            notification.
    """
    route = ROUTES[routing_key]
    payload = route.build(event)
    if payload is None:
        logger.info("Event produced no notification", routing_key=routing_key)
        return []

    outcomes = deliver(payload, list(route.channels))

    for outcome in outcomes:
        if outcome.success:
            continue
        log = logger.error if outcome.channel == DeliveryChannel.IN_APP.value else logger.warning
        log(
            "Notification delivery failed",
            routing_key=routing_key,
            channel=outcome.channel,
            user_id=payload.user_id,
            error=outcome.error,
        )

    failed_in_app = [o for o in outcomes if o.channel == DeliveryChannel.IN_APP.value and not o.success]
    if failed_in_app:
        raise ChannelDeliveryError(DeliveryChannel.IN_APP.value, failed_in_app[0].error)

    return outcomes
