"""Push payload sink: builds one push notification payload per target.

Each target becomes a topic (``"category:3"``, ``"comment:12"``) that the
push transport fans out to its subscribers.  This sink only builds the
payloads; sending them is the transport's job.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from pushsource.models.delivery import Delivery
from pushsource.routing.sinks._formatting import notification_body, notification_title

logger = logging.getLogger(__name__)


class PushPayload(BaseModel):
    """A topic-addressed push notification."""

    model_config = ConfigDict(frozen=True)

    topic: str
    title: str
    body: str
    object_type: str = ""
    object_id: int
    delivery_id: str


class PushPayloadSink:
    """Buffers push payloads built from deliveries.

    Deliveries with no targets produce no payloads.  Call ``flush()`` to
    retrieve and clear the buffer.
    """

    needs_targets = True

    def __init__(self) -> None:
        self._pending_payloads: list[PushPayload] = []

    @property
    def sink_name(self) -> str:
        return "push_payload"

    def accept(self, delivery: Delivery) -> None:
        title = notification_title(delivery.message)
        body = notification_body(delivery.message)
        for target in delivery.targets:
            self._pending_payloads.append(
                PushPayload(
                    topic=target.topic,
                    title=title,
                    body=body,
                    object_type=delivery.object_type,
                    object_id=delivery.message.id,
                    delivery_id=delivery.delivery_id,
                )
            )
        logger.debug(
            "PushPayloadSink: queued %d payload(s) for delivery %s",
            len(delivery.targets),
            delivery.delivery_id,
        )

    def flush(self) -> list[PushPayload]:
        """Return and clear all pending payloads."""
        payloads = list(self._pending_payloads)
        self._pending_payloads.clear()
        return payloads

    @property
    def pending_count(self) -> int:
        return len(self._pending_payloads)
