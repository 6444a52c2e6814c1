"""In-memory event publisher for development and testing.

Records every delivered message instead of sending it anywhere. It can be
told to fail after a number of deliveries, which makes partial
publication reproducible in tests.
"""

from catalogue.messaging.messages import IntegrationMessage
from catalogue.messaging.port import EventPublisher


class InMemoryEventPublisher(EventPublisher):
    """Recording publisher."""

    def __init__(self) -> None:
        self.published: list[IntegrationMessage] = []
        self.fail_after: int | None = None
        self.failure_reason: str = "Message bus unavailable"

    def configure(self, fail_after: int | None = None, failure_reason: str = "Message bus unavailable") -> None:
        """Fail every delivery once ``fail_after`` messages have gone out."""
        self.fail_after = fail_after
        self.failure_reason = failure_reason

    def publish(self, event: IntegrationMessage) -> None:
        if self.fail_after is not None and len(self.published) >= self.fail_after:
            raise ConnectionError(self.failure_reason)
        self.published.append(event)

    def of_type(self, message_class) -> list[IntegrationMessage]:
        return [event for event in self.published if isinstance(event, message_class)]

    def clear(self) -> None:
        self.published.clear()
