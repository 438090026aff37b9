"""Normalized notification payloads and their subscription targets."""

from __future__ import annotations

import hashlib
import json
import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Message(BaseModel):
    """The canonical notification payload for one piece of content."""

    model_config = ConfigDict(frozen=True)

    id: int
    user_id: int
    username: str
    title: str | None = None
    content: str = ""
    section_title: str | None = None
    post_title: str | None = None

    @field_validator("username")
    @classmethod
    def _username_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("username must not be empty")
        return value


class Target(BaseModel):
    """A subscriber group: ``(entity_type, entity_id)``."""

    model_config = ConfigDict(frozen=True)

    entity_type: str
    entity_id: int

    def as_tuple(self) -> tuple[str, int]:
        return (self.entity_type, self.entity_id)

    @property
    def topic(self) -> str:
        """Push topic name, e.g. ``"category:3"``."""
        return f"{self.entity_type}:{self.entity_id}"


class Delivery(BaseModel):
    """A message handed to the delivery pipeline together with its targets."""

    model_config = ConfigDict(frozen=True)

    delivery_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    object_type: str = ""
    fingerprint: str = ""  # SHA-256 of canonical object_type + message + targets
    message: Message
    targets: list[Target] = []
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )


def delivery_fingerprint(
    object_type: str, message: Message, targets: list[Target]
) -> str:
    """SHA-256 over the object type, message fields and ordered targets.

    Replaying the same insertion yields the same fingerprint, so sinks can
    recognise a repeated delivery even though its ``delivery_id`` is new.
    """
    payload = {
        "object_type": object_type,
        "message": message.model_dump(mode="json"),
        "targets": [list(t.as_tuple()) for t in targets],
    }
    encoded = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()
