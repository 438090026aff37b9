"""Lifecycle events reported by the host when content is inserted."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class LifecycleKind(str, Enum):
    """Which host hook produced the event."""

    POST_INSERTED = "post_inserted"
    COMMENT_INSERTED = "comment_inserted"


class LifecycleEvent(BaseModel):
    """Raw insertion metadata, consumed once by the insertion gate.

    ``approval_state`` is ``True`` only for approved comments; pending,
    spam and trash map to ``False`` or ``None``.  ``content_type`` carries
    the post's type name, ``record_present`` whether the comment record
    could be fetched back from the host.
    """

    model_config = ConfigDict(frozen=True)

    kind: LifecycleKind
    is_update: bool = False
    is_autosave: bool = False
    is_revision: bool = False
    is_rest_originated: bool = False
    approval_state: bool | None = None
    content_type: str | None = None
    record_present: bool = True
