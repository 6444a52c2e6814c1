"""Event publisher factory.

Provides get_publisher() / set_publisher() to swap implementations:
- InMemoryEventPublisher for development and testing (default)
- BrokerEventPublisher for deployments with a message broker

The default adapter is chosen by the EVENT_PUBLISHER_ADAPTER environment
variable (``memory`` or ``broker``).
"""

import os

from catalogue.messaging.port import EventPublisher

_current_publisher: EventPublisher | None = None


def get_publisher() -> EventPublisher:
    """Return the current event publisher."""
    global _current_publisher
    if _current_publisher is None:
        adapter = os.environ.get("EVENT_PUBLISHER_ADAPTER", "memory")
        if adapter == "memory":
            from catalogue.messaging.memory_adapter import InMemoryEventPublisher

            _current_publisher = InMemoryEventPublisher()
        elif adapter == "broker":
            from catalogue.messaging.broker_adapter import BrokerEventPublisher

            _current_publisher = BrokerEventPublisher()
        else:
            raise ValueError(f"Unknown event publisher adapter: {adapter}")
    return _current_publisher


def set_publisher(publisher: EventPublisher) -> None:
    """Override the active publisher (useful for tests)."""
    global _current_publisher
    _current_publisher = publisher


def reset_publisher() -> None:
    """Reset to the default publisher."""
    global _current_publisher
    _current_publisher = None
