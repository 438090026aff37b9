"""Unit tests for pushsource models: immutability and validation."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from pushsource.models import (
    Comment,
    ContentItem,
    ContentKind,
    Delivery,
    LifecycleEvent,
    LifecycleKind,
    Message,
    Post,
    Target,
)


class TestContentItem:
    def test_discriminated_union_picks_post(self):
        item = TypeAdapter(ContentItem).validate_python({"kind": "post", "id": 1})
        assert isinstance(item, Post)

    def test_discriminated_union_picks_comment(self):
        item = TypeAdapter(ContentItem).validate_python(
            {"kind": "comment", "id": 2, "post_id": 1}
        )
        assert isinstance(item, Comment)
        assert item.parent_comment_id == 0

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            TypeAdapter(ContentItem).validate_python({"kind": "page", "id": 1})

    def test_kind_values_match_enum(self):
        assert Post(id=1).kind == ContentKind.POST.value
        assert Comment(id=1, post_id=1).kind == ContentKind.COMMENT.value

    def test_post_is_frozen(self):
        post = Post(id=1, title="x")
        with pytest.raises(ValidationError):
            post.title = "y"


class TestMessage:
    def test_empty_username_rejected(self):
        with pytest.raises(ValidationError):
            Message(id=1, user_id=0, username="")

    def test_defaults(self):
        message = Message(id=1, user_id=0, username="Anonymous")
        assert message.title is None
        assert message.section_title is None
        assert message.post_title is None


class TestTarget:
    def test_topic_and_tuple(self):
        target = Target(entity_type="category", entity_id=3)
        assert target.topic == "category:3"
        assert target.as_tuple() == ("category", 3)

    def test_targets_are_hashable(self):
        a = Target(entity_type="post", entity_id=1)
        b = Target(entity_type="post", entity_id=1)
        assert {a, b} == {a}


class TestDelivery:
    def test_unique_ids(self):
        message = Message(id=1, user_id=0, username="A")
        assert Delivery(message=message).delivery_id != Delivery(message=message).delivery_id

    def test_json_round_trip(self):
        delivery = Delivery(
            object_type="post",
            message=Message(id=1, user_id=0, username="A"),
            targets=[Target(entity_type="category", entity_id=3)],
        )
        assert Delivery.model_validate_json(delivery.model_dump_json()) == delivery


class TestLifecycleEvent:
    def test_defaults(self):
        event = LifecycleEvent(kind=LifecycleKind.POST_INSERTED)
        assert event.is_update is False
        assert event.record_present is True
        assert event.approval_state is None
