"""Handler middleware: bounded retry wrapped in structured logging.

Event handler methods are composed as ``logging(retry(handler))`` through
the ``consumes`` decorator. The Protean Engine acknowledges a message when
the handler returns, so acknowledgement happens exactly once, after the
(possibly retried) body has finished:

- body succeeds, possibly after retries: return, message acknowledged
- retries exhausted, ``ack_on_failure`` on: error logged, return, acknowledged
- retries exhausted, ``ack_on_failure`` off: re-raised, left to the broker
  for redelivery

Attempts run back to back. Handlers execute on the Engine's event loop, so
any delay between redeliveries belongs to the broker subscription
(``retry_delay_seconds``), not to this wrapper.
"""

import functools
import time

import structlog
from notifications.config import load_settings

logger = structlog.get_logger(__name__)


def with_retry(routing_key: str, max_attempts: int | None = None, ack_on_failure=None):
    """Re-run the wrapped handler on failure, up to ``max_attempts`` times.

    Unset parameters are read from the service settings on every call.

    Raises:
        ValueError: ``max_attempts`` is given and smaller than 1.
    """
    if max_attempts is not None and max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            settings = load_settings()
            attempts = max_attempts if max_attempts is not None else settings.handler_max_attempts
            ack = ack_on_failure if ack_on_failure is not None else settings.ack_on_failure

            for attempt in range(1, attempts + 1):
                try:
                    return fn(*args, **kwargs)
                except Exception as exc:
                    if attempt == attempts:
                        logger.error(
                            "Event handler retries exhausted",
                            routing_key=routing_key,
                            attempts=attempts,
                            error=str(exc),
                            acknowledged=ack,
                        )
                        if not ack:
                            raise
                        return None

                    logger.warning(
                        "Event handler failed, retrying",
                        routing_key=routing_key,
                        attempt=attempt,
                        max_attempts=attempts,
                        error=str(exc),
                    )

        return wrapper

    return decorator


def with_logging(routing_key: str):
    """Log receipt, completion and duration of every handled event."""

    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            log = logger.bind(routing_key=routing_key, handler=fn.__qualname__)
            log.info("Event received")
            started = time.perf_counter()
            try:
                result = fn(*args, **kwargs)
            except Exception:
                log.exception("Event handler failed", duration_ms=round((time.perf_counter() - started) * 1000, 2))
                raise
            log.info("Event handled", duration_ms=round((time.perf_counter() - started) * 1000, 2))
            return result

        return wrapper

    return decorator


def consumes(routing_key: str):
    """Standard middleware stack for an inbound event handler."""

    def decorator(fn):
        return with_logging(routing_key)(with_retry(routing_key)(fn))

    return decorator
