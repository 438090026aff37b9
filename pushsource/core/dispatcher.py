"""EventDispatcher: gate, normalize, resolve targets, hand off to delivery.

Purely synchronous orchestration triggered once per lifecycle event.  No
retries or queueing live here; the delivery sink owns those.
"""

from __future__ import annotations

import logging

from pushsource.core.gate import InsertionGate
from pushsource.core.normalizer import ANONYMOUS, normalize
from pushsource.core.protocols import (
    ContentSanitizer,
    DeliverySink,
    EntityTypeRegistry,
    PostTitleLookup,
    TaxonomyLookup,
    UserDirectory,
)
from pushsource.core.targets import resolve_targets
from pushsource.models.content import Comment, Post
from pushsource.models.delivery import Delivery
from pushsource.models.events import LifecycleEvent

logger = logging.getLogger(__name__)


class EventDispatcher:
    """Turns accepted lifecycle events into deliveries.

    Usage
    -----
    >>> dispatcher = EventDispatcher(registry, directory, taxonomy,
    ...                              sanitizer, titles, sink)
    >>> dispatcher.dispatch(event, post)
    """

    def __init__(
        self,
        registry: EntityTypeRegistry,
        directory: UserDirectory,
        taxonomy: TaxonomyLookup,
        sanitizer: ContentSanitizer,
        titles: PostTitleLookup,
        sink: DeliverySink,
        *,
        anonymous_name: str = ANONYMOUS,
    ) -> None:
        self.registry = registry
        self.directory = directory
        self.taxonomy = taxonomy
        self.sanitizer = sanitizer
        self.titles = titles
        self.sink = sink
        self.anonymous_name = anonymous_name
        self.gate = InsertionGate(registry)

    def classify(self, item: object) -> str:
        """Return the entity type name used to route *item*, or ``""``."""
        if isinstance(item, Post):
            return self.registry.get("post")
        if isinstance(item, Comment):
            return self.registry.get("comment")
        return ""

    def dispatch(self, event: LifecycleEvent, item: object) -> Delivery | None:
        """Process one lifecycle event.

        Returns the ``Delivery`` handed to the sink, or ``None`` when the
        gate rejected the event.

        Raises
        ------
        InvalidContentKind
            If the event passed the gate but *item* is not a post or comment.
        """
        if not self.gate.should_process(event):
            return None

        message = normalize(
            item,
            self.directory,
            self.sanitizer,
            self.titles,
            anonymous_name=self.anonymous_name,
        )
        targets = resolve_targets(item, self.registry, self.taxonomy)
        object_type = self.classify(item)

        logger.info(
            "Dispatching %s %s to %d target(s)",
            object_type,
            message.id,
            len(targets),
        )
        return self.sink.deliver(message, targets, object_type=object_type)
