"""Protean Engine runner for the notification service.

Starts the Engine that consumes inbound events from the broker and hands
them to the notification event handlers:
- ClipEventsHandler: clip.approved, clip.rejected
- CampaignEventsHandler: campaign.status_changed, campaign.ended
- PayoutEventsHandler: payment.payout_completed
- DisputeEventsHandler: dispute.created, dispute.resolved

Usage:
    python src/server.py
"""

import argparse
import asyncio

import structlog
from notifications.domain import notifications
from notifications.notification.routing import ROUTING_KEYS
from notifications.utils.logging import configure_logging
from protean.server.engine import Engine

logger = structlog.get_logger(__name__)


async def run():
    notifications.init()
    engine = Engine(notifications)

    logger.info("Starting event consumer", routing_keys=list(ROUTING_KEYS))
    await engine.run()


def main():
    parser = argparse.ArgumentParser(description="Notification service Engine runner")
    parser.parse_args()

    configure_logging()
    asyncio.run(run())


if __name__ == "__main__":
    main()
