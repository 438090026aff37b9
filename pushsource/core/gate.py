"""Insertion gate: decides whether a lifecycle event should notify anyone.

Edits, autosaves, revisions, unapproved comments and REST-originated writes
are skipped.  A rejection is an expected outcome, not an error.
"""

from __future__ import annotations

import logging

from pushsource.core.protocols import EntityTypeRegistry
from pushsource.models.events import LifecycleEvent, LifecycleKind

logger = logging.getLogger(__name__)


class InsertionGate:
    """Pure predicate over ``LifecycleEvent``.

    Parameters
    ----------
    registry:
        Supplies the ``post`` entity type a post must carry to pass.
    """

    def __init__(self, registry: EntityTypeRegistry) -> None:
        self._registry = registry

    def should_process(self, event: LifecycleEvent) -> bool:
        reason = self.rejection_reason(event)
        if reason:
            logger.debug("Skipping %s event: %s", event.kind.value, reason)
            return False
        return True

    def rejection_reason(self, event: LifecycleEvent) -> str:
        """Return why *event* is rejected, or ``""`` if it passes."""
        if event.kind == LifecycleKind.POST_INSERTED:
            if event.is_update:
                return "update"
            if event.content_type != self._registry.get("post"):
                return f"content type {event.content_type!r}"
            if event.is_autosave:
                return "autosave"
            if event.is_revision:
                return "revision"
            if event.is_rest_originated:
                return "REST request"
            return ""

        if event.kind == LifecycleKind.COMMENT_INSERTED:
            if event.is_update:
                return "update"
            if not event.record_present:
                return "comment record missing"
            if event.approval_state is not True:
                return "comment not approved"
            if event.is_rest_originated:
                return "REST request"
            return ""

        return f"unknown event kind {event.kind!r}"
