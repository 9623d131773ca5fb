"""Cross-service event contracts for Payments domain events.

Only payout completion is consumed here; the source-of-truth events live
in the payments service.
"""

from protean.core.event import BaseEvent
from protean.fields import Identifier, Integer, String


class PayoutCompleted(BaseEvent):
    """A creator payout settled."""

    __version__ = 1

    payout_id = Identifier(required=True)
    user_id = Identifier(required=True)
    amount = Integer(required=True, min_value=0)  # minor units (cents)
    transaction_hash = String(max_length=200)
