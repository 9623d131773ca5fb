"""Service settings read from the process environment.

Protean infrastructure (databases, brokers, event store) is configured in
domain.toml; everything the service itself needs lives here. Settings are
read on every call so tests can tweak the environment with monkeypatch.
"""

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_origins: tuple[str, ...] = ("http://localhost:3000",)
    discord_service_url: str | None = None
    handler_max_attempts: int = 3
    ack_on_failure: bool = True


def _origins(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return Settings.allowed_origins
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


def load_settings() -> Settings:
    """Build Settings from environment variables, falling back to defaults."""
    max_attempts = int(os.environ.get("EVENT_HANDLER_MAX_ATTEMPTS", Settings.handler_max_attempts))
    if max_attempts < 1:
        raise ValueError("EVENT_HANDLER_MAX_ATTEMPTS must be at least 1")

    return Settings(
        host=os.environ.get("HOST", Settings.host),
        port=int(os.environ.get("PORT", Settings.port)),
        allowed_origins=_origins(os.environ.get("ALLOWED_ORIGINS")),
        discord_service_url=os.environ.get("DISCORD_SERVICE_URL") or None,
        handler_max_attempts=max_attempts,
        ack_on_failure=os.environ.get("EVENT_ACK_ON_FAILURE", "true").strip().lower() in _TRUTHY,
    )
