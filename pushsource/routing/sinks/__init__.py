"""Delivery sinks.

A sink has a unique ``sink_name`` and an ``accept(delivery)`` method.  A
sink that builds per-target output sets ``needs_targets = True`` and is
not offered deliveries without targets.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pushsource.models.delivery import Delivery


@runtime_checkable
class BaseSink(Protocol):
    @property
    def sink_name(self) -> str:
        ...

    def accept(self, delivery: Delivery) -> None:
        ...
