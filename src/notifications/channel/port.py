"""Channel port: the contract every delivery channel implements.

A channel receives a DeliveryPayload and either returns (delivered, or
deliberately skipped) or raises ChannelDeliveryError. The coordinator turns
each attempt into a DeliveryOutcome, so channels never need to know about
one another.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum


class DeliveryChannel(Enum):
    IN_APP = "in_app"
    DISCORD = "discord"


@dataclass(frozen=True)
class DeliveryPayload:
    """Normalized notification content, built fresh for each inbound event."""

    user_id: str
    notification_type: str
    title: str
    message: str | None = None
    link: str | None = None
    metadata: dict | None = field(default=None, hash=False)


@dataclass(frozen=True)
class DeliveryOutcome:
    """Result of one channel attempt; returned to the caller, never stored."""

    channel: str
    success: bool
    error: str | None = None

    def to_dict(self) -> dict:
        data = {"channel": self.channel, "success": self.success}
        if self.error is not None:
            data["error"] = self.error
        return data


class ChannelDeliveryError(Exception):
    """A channel could not deliver; carries the channel name and the cause."""

    def __init__(self, channel: str, cause: Exception | str):
        self.channel = channel
        self.cause = cause
        super().__init__(f"{channel} delivery failed: {cause}")


class UnknownChannelError(ChannelDeliveryError):
    def __init__(self, channel: str):
        super().__init__(channel, "Unknown channel")

    def __str__(self) -> str:
        return "Unknown channel"


class ChannelPort(ABC):
    """Abstract interface for delivery channel adapters."""

    name: str

    @abstractmethod
    def send(self, payload: DeliveryPayload) -> None:
        """Deliver the payload or raise ChannelDeliveryError."""
        ...
