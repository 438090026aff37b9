"""DeliveryDispatcher: the delivery sink the core hands messages to.

Each ``(message, targets)`` pair becomes one ``Delivery`` that is offered to
every attached sink.  Sinks that only work per target (push payload
builders) are not offered deliveries that have no targets.  A sink that
raises is logged and the rest still run; the delivery only fails when no
eligible sink took it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from pushsource.models.delivery import (
    Delivery,
    Message,
    Target,
    delivery_fingerprint,
)

if TYPE_CHECKING:
    from pushsource.routing.sinks import BaseSink

logger = logging.getLogger(__name__)


class SinkDispatchError(RuntimeError):
    """No eligible sink accepted a delivery.

    ``failures`` maps each sink name to the exception it raised.
    """

    def __init__(self, delivery: Delivery, failures: dict[str, Exception]) -> None:
        self.delivery = delivery
        self.failures = failures
        kind = delivery.object_type or "content"
        super().__init__(
            f"No sink accepted {kind} {delivery.message.id} "
            f"(delivery {delivery.delivery_id}): "
            + "; ".join(f"{name}: {exc}" for name, exc in failures.items())
        )


class DeliveryDispatcher:
    """Fans deliveries out to named sinks.

    Usage
    -----
    >>> dispatcher = DeliveryDispatcher([LocalFileSink(path), PushPayloadSink()])
    >>> dispatcher.deliver(message, targets, object_type="post")
    """

    def __init__(self, sinks: Iterable[BaseSink] = ()) -> None:
        self._sinks: dict[str, BaseSink] = {}
        for sink in sinks:
            self.add_sink(sink)

    def add_sink(self, sink: BaseSink) -> None:
        """Attach *sink*.  Sink names must be unique."""
        if sink.sink_name in self._sinks:
            raise ValueError(f"A sink named {sink.sink_name!r} is already attached")
        self._sinks[sink.sink_name] = sink

    def deliver(
        self, message: Message, targets: list[Target], object_type: str = ""
    ) -> Delivery:
        """Record *message* for *targets* and offer it to the sinks.

        Raises
        ------
        SinkDispatchError
            If every eligible sink failed.
        """
        delivery = Delivery(
            object_type=object_type,
            fingerprint=delivery_fingerprint(object_type, message, targets),
            message=message,
            targets=list(targets),
        )
        accepted = self.dispatch(delivery)
        logger.debug(
            "%s %s -> %s accepted by %s",
            object_type or "content",
            message.id,
            ", ".join(t.topic for t in delivery.targets) or "no targets",
            ", ".join(accepted) or "no sink",
        )
        return delivery

    def dispatch(self, delivery: Delivery) -> list[str]:
        """Offer an existing delivery to every eligible sink.

        Returns the names of the sinks that accepted it.
        """
        eligible = [
            sink
            for sink in self._sinks.values()
            if delivery.targets or not getattr(sink, "needs_targets", False)
        ]

        accepted: list[str] = []
        failures: dict[str, Exception] = {}
        for sink in eligible:
            try:
                sink.accept(delivery)
            except Exception as exc:  # noqa: BLE001
                logger.error(
                    "%s could not take %s %s: %s",
                    sink.sink_name,
                    delivery.object_type or "content",
                    delivery.message.id,
                    exc,
                )
                failures[sink.sink_name] = exc
            else:
                accepted.append(sink.sink_name)

        if failures and not accepted:
            raise SinkDispatchError(delivery, failures)
        return accepted
