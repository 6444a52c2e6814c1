"""Event publisher port (abstract interface).

Defines the contract every publisher adapter implements, so the catalogue
can switch between the in-memory recorder (dev/test) and the broker
adapter without touching application code.
"""

from abc import ABC, abstractmethod

from catalogue.messaging.messages import IntegrationMessage


class EventPublisher(ABC):
    """Abstract event publisher interface."""

    @abstractmethod
    def publish(self, event: IntegrationMessage) -> None:
        """Deliver a single message. Raises on failure."""
        ...

    def publish_all(self, events: list[IntegrationMessage]) -> None:
        """Deliver messages one by one, stopping at the first failure.

        Messages already delivered stay delivered.
        """
        for event in events:
            self.publish(event)
