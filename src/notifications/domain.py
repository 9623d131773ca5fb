"""Notifications bounded context: event-to-notification fan-out service.

Consumes events published by the clip review, campaign, payments and
dispute services, turns each into a user-facing notification, stores it
in the user's inbox and optionally relays it over Discord. Users read and
manage their inbox through the notifications API.
"""

import structlog
from protean.domain import Domain

notifications = Domain(name="notifications")

logger = structlog.get_logger(__name__)
