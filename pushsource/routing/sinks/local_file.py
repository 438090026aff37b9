"""Local file sink: one JSON file per delivered message.

Files are named after the message and the delivery fingerprint, so a
replayed insertion overwrites its earlier file instead of adding a copy:

    {base_path}/{object_type}/{message_id}-{fingerprint[:16]}.json
"""

from __future__ import annotations

import logging
from pathlib import Path

from pushsource.models.delivery import Delivery

logger = logging.getLogger(__name__)


class LocalFileSink:
    sink_name = "local_file"
    needs_targets = False

    def __init__(self, base_path: Path | str | None = None) -> None:
        self._base = Path(base_path) if base_path else Path(".pushsource/deliveries")
        self._base.mkdir(parents=True, exist_ok=True)

    def path_for(self, delivery: Delivery) -> Path:
        stem = delivery.fingerprint[:16] or delivery.delivery_id
        folder = delivery.object_type or "_unknown"
        return self._base / folder / f"{delivery.message.id}-{stem}.json"

    def accept(self, delivery: Delivery) -> None:
        path = self.path_for(delivery)
        if path.exists():
            logger.info("Replacing earlier delivery of %s %s", path.parent.name, delivery.message.id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(delivery.model_dump_json(indent=2), encoding="utf-8")

    def list_deliveries(self, object_type: str | None = None) -> list[Path]:
        """Delivery files, optionally for one object type only."""
        root = self._base / object_type if object_type else self._base
        if not root.exists():
            return []
        return sorted(root.rglob("*.json"))

    def read_delivery(self, path: Path) -> Delivery:
        return Delivery.model_validate_json(path.read_text(encoding="utf-8"))
