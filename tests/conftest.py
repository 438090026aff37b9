"""Shared test fixtures for pushsource."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from pushsource.core.dispatcher import EventDispatcher
from pushsource.core.in_memory import (
    InMemoryCommentStore,
    InMemoryPostTitles,
    InMemoryTaxonomy,
    InMemoryUserDirectory,
)
from pushsource.core.registry import StaticEntityTypeRegistry
from pushsource.core.sanitizer import HtmlContentSanitizer
from pushsource.models.content import Comment, Post
from pushsource.models.delivery import Delivery, Message, Target
from pushsource.models.events import LifecycleEvent, LifecycleKind
from pushsource.source import PushSource


class RecordingDeliverySink:
    """Delivery sink that records every call instead of sending anything."""

    def __init__(self) -> None:
        self.deliveries: list[Delivery] = []

    def deliver(
        self, message: Message, targets: list[Target], object_type: str = ""
    ) -> Delivery:
        delivery = Delivery(object_type=object_type, message=message, targets=targets)
        self.deliveries.append(delivery)
        return delivery


@pytest.fixture
def registry() -> StaticEntityTypeRegistry:
    """Registry with the default post / comment / category names."""
    return StaticEntityTypeRegistry(
        {"post": "post", "comment": "comment", "section": "category"}
    )


@pytest.fixture
def directory() -> InMemoryUserDirectory:
    return InMemoryUserDirectory({7: "Alice", 8: "Bob"})


@pytest.fixture
def taxonomy() -> InMemoryTaxonomy:
    return InMemoryTaxonomy({(42, "category"): [3, 5]})


@pytest.fixture
def titles() -> InMemoryPostTitles:
    return InMemoryPostTitles({42: "Hello"})


@pytest.fixture
def sanitizer() -> HtmlContentSanitizer:
    return HtmlContentSanitizer(max_length=140)


@pytest.fixture
def comments() -> InMemoryCommentStore:
    return InMemoryCommentStore()


@pytest.fixture
def sink() -> RecordingDeliverySink:
    return RecordingDeliverySink()


@pytest.fixture
def dispatcher(
    registry: StaticEntityTypeRegistry,
    directory: InMemoryUserDirectory,
    taxonomy: InMemoryTaxonomy,
    sanitizer: HtmlContentSanitizer,
    titles: InMemoryPostTitles,
    sink: RecordingDeliverySink,
) -> EventDispatcher:
    """Provide an EventDispatcher wired to the in-memory collaborators."""
    return EventDispatcher(registry, directory, taxonomy, sanitizer, titles, sink)


@pytest.fixture
def source(
    dispatcher: EventDispatcher, comments: InMemoryCommentStore
) -> PushSource:
    return PushSource(dispatcher, comments)


# ---------------------------------------------------------------------------
# Content and event factories: shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_post() -> Callable[..., Post]:
    """Factory fixture: build a Post with the scenario defaults."""

    def _factory(**overrides: Any) -> Post:
        defaults: dict[str, Any] = {
            "id": 42,
            "author_id": 7,
            "title": "Hello",
            "body": "<p>Hi</p>",
            "post_type": "post",
        }
        defaults.update(overrides)
        return Post(**defaults)

    return _factory


@pytest.fixture
def make_comment() -> Callable[..., Comment]:
    """Factory fixture: build an approved top-level Comment on post 42."""

    def _factory(**overrides: Any) -> Comment:
        defaults: dict[str, Any] = {
            "id": 100,
            "post_id": 42,
            "author_id": 8,
            "body": "<em>Nice</em> post",
            "approved": True,
        }
        defaults.update(overrides)
        return Comment(**defaults)

    return _factory


@pytest.fixture
def make_post_event() -> Callable[..., LifecycleEvent]:
    def _factory(**overrides: Any) -> LifecycleEvent:
        defaults: dict[str, Any] = {
            "kind": LifecycleKind.POST_INSERTED,
            "content_type": "post",
        }
        defaults.update(overrides)
        return LifecycleEvent(**defaults)

    return _factory


@pytest.fixture
def make_comment_event() -> Callable[..., LifecycleEvent]:
    def _factory(**overrides: Any) -> LifecycleEvent:
        defaults: dict[str, Any] = {
            "kind": LifecycleKind.COMMENT_INSERTED,
            "approval_state": True,
        }
        defaults.update(overrides)
        return LifecycleEvent(**defaults)

    return _factory
