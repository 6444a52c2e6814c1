"""Event publisher backed by the domain's Protean broker.

Each message is wrapped in a CloudEvents-style envelope and written to
the stream configured for its type in the ``[custom]`` section of
domain.toml.
"""

from datetime import UTC, datetime
from uuid import uuid4

import structlog
from protean.utils.globals import current_domain

from catalogue.messaging.messages import IntegrationMessage, ProductCreatedMessage, SkuCreatedMessage
from catalogue.messaging.port import EventPublisher

logger = structlog.get_logger(__name__)

DEFAULT_EVENT_SOURCE = "catalog-service"

_STREAM_SETTINGS = {
    ProductCreatedMessage.event_type: "PRODUCT_CREATED_STREAM",
    SkuCreatedMessage.event_type: "SKU_CREATED_STREAM",
}


def _custom_config() -> dict:
    return current_domain.config.get("custom", {}) or {}


def build_envelope(event: IntegrationMessage, source: str) -> dict:
    return {
        "id": str(uuid4()),
        "source": source,
        "type": event.event_type,
        "time": datetime.now(UTC).isoformat(),
        "data": event.model_dump(mode="json"),
    }


class BrokerEventPublisher(EventPublisher):
    """Publishes to a Protean broker. Defaults to the domain's ``default`` broker."""

    def __init__(self, broker=None, source: str | None = None) -> None:
        self._broker = broker
        self._source = source

    @property
    def broker(self):
        if self._broker is None:
            return current_domain.brokers["default"]
        return self._broker

    @property
    def source(self) -> str:
        return self._source or _custom_config().get("EVENT_SOURCE", DEFAULT_EVENT_SOURCE)

    def stream_for(self, event: IntegrationMessage) -> str:
        setting = _STREAM_SETTINGS.get(event.event_type)
        if setting is None:
            return event.event_type
        return _custom_config().get(setting, event.event_type)

    def publish(self, event: IntegrationMessage) -> None:
        stream = self.stream_for(event)
        envelope = build_envelope(event, self.source)
        self.broker.publish(stream, envelope)
        logger.debug("Event published", stream=stream, event_id=envelope["id"], event_type=event.event_type)
