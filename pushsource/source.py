"""PushSource: host adapter for post and comment insertion hooks.

The host calls ``on_post_inserted`` / ``on_comment_inserted`` (directly, or
through a ``HookBus`` after ``register``).  Each entry point turns the raw
host data into a ``LifecycleEvent`` and hands it to the ``EventDispatcher``,
which gates, normalizes and delivers.
"""

from __future__ import annotations

import logging
from typing import Any

from pushsource.config import PushSourceConfig
from pushsource.core.dispatcher import EventDispatcher
from pushsource.core.errors import InvalidContentKind
from pushsource.core.hook_bus import HookBus
from pushsource.core.protocols import (
    CommentStore,
    ContentSanitizer,
    DeliverySink,
    PostTitleLookup,
    TaxonomyLookup,
    UserDirectory,
)
from pushsource.core.registry import StaticEntityTypeRegistry
from pushsource.core.sanitizer import HtmlContentSanitizer
from pushsource.models.content import Post
from pushsource.models.delivery import Delivery
from pushsource.models.events import LifecycleEvent, LifecycleKind

logger = logging.getLogger(__name__)

POST_HOOK = "insert_post"
COMMENT_HOOK = "insert_comment"


class PushSource:
    """Feeds new posts and approved comments to the push delivery sink.

    Parameters
    ----------
    dispatcher:
        The configured event dispatcher.
    comments:
        Fetches comment records back from the host by id.
    """

    def __init__(self, dispatcher: EventDispatcher, comments: CommentStore) -> None:
        self.dispatcher = dispatcher
        self.comments = comments

    @classmethod
    def from_config(
        cls,
        config: PushSourceConfig,
        *,
        directory: UserDirectory,
        taxonomy: TaxonomyLookup,
        titles: PostTitleLookup,
        comments: CommentStore,
        sink: DeliverySink,
        sanitizer: ContentSanitizer | None = None,
    ) -> PushSource:
        """Build a push source wired from *config* and the host collaborators."""
        dispatcher = EventDispatcher(
            registry=StaticEntityTypeRegistry.from_config(config),
            directory=directory,
            taxonomy=taxonomy,
            sanitizer=sanitizer or HtmlContentSanitizer(config.content_max_length),
            titles=titles,
            sink=sink,
            anonymous_name=config.anonymous_name,
        )
        return cls(dispatcher, comments)

    # ------------------------------------------------------------------
    # Host entry points
    # ------------------------------------------------------------------

    def on_post_inserted(
        self,
        post_id: int,
        post: Post,
        updating: bool,
        *,
        rest_request: bool = False,
    ) -> Delivery | None:
        """Handle the host's post-inserted hook.

        The record's own ``post.id`` identifies the message; a *post_id*
        that disagrees with it is logged and otherwise ignored.
        """
        if not isinstance(post, Post):
            logger.error(
                "Post hook for %s received %s, not a post", post_id, type(post).__name__
            )
            return None

        if post_id != post.id:
            logger.warning(
                "Post hook id %s does not match record id %s; using the record id",
                post_id,
                post.id,
            )

        event = LifecycleEvent(
            kind=LifecycleKind.POST_INSERTED,
            is_update=updating,
            is_autosave=post.is_autosave,
            is_revision=post.is_revision,
            is_rest_originated=rest_request,
            content_type=post.post_type,
        )
        return self._handle(event, post)

    def on_comment_inserted(
        self,
        comment_id: int,
        comment_data: dict[str, Any] | None = None,
        *,
        rest_request: bool = False,
    ) -> Delivery | None:
        """Handle the host's comment-inserted hook.

        The stored record is fetched back by id; *comment_data* is the raw
        creation payload and is not trusted for approval state.
        """
        comment = self.comments.get(comment_id)
        event = LifecycleEvent(
            kind=LifecycleKind.COMMENT_INSERTED,
            record_present=comment is not None,
            approval_state=comment.approved if comment is not None else None,
            is_rest_originated=rest_request,
        )
        return self._handle(event, comment)

    def register(self, bus: HookBus) -> None:
        """Attach both entry points to the host's hook bus."""
        bus.add_handler(POST_HOOK, self.on_post_inserted)
        bus.add_handler(COMMENT_HOOK, self.on_comment_inserted)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _handle(self, event: LifecycleEvent, item: object) -> Delivery | None:
        try:
            return self.dispatcher.dispatch(event, item)
        except InvalidContentKind as exc:
            logger.error("Dropping %s event: %s", event.kind.value, exc)
            return None
