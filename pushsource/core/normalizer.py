"""Content normalizer: turns a post or comment into a ``Message``.

Lookups never fail the event.  A directory error or a missing user falls
back to the comment's stored author name (guest comments only) and then to
the anonymous placeholder.  A failed post title lookup leaves
``post_title`` unset.
"""

from __future__ import annotations

import logging

from pushsource.core.errors import InvalidContentKind
from pushsource.core.protocols import ContentSanitizer, PostTitleLookup, UserDirectory
from pushsource.models.content import Comment, Post
from pushsource.models.delivery import Message

logger = logging.getLogger(__name__)

ANONYMOUS = "Anonymous"


def _lookup_display_name(directory: UserDirectory, user_id: int) -> str | None:
    if user_id <= 0:
        return None
    try:
        name = directory.display_name(user_id)
    except Exception as exc:  # noqa: BLE001
        logger.warning("User directory lookup failed for user %s: %s", user_id, exc)
        return None
    return name or None


def _lookup_post_title(titles: PostTitleLookup, post_id: int) -> str | None:
    try:
        return titles.title_for(post_id)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Post title lookup failed for post %s: %s", post_id, exc)
        return None


def normalize(
    item: object,
    directory: UserDirectory,
    sanitizer: ContentSanitizer,
    titles: PostTitleLookup,
    anonymous_name: str = ANONYMOUS,
) -> Message:
    """Build the canonical message for *item*.

    Parameters
    ----------
    item:
        A ``Post`` or ``Comment``.
    directory:
        Resolves author ids to display names.
    sanitizer:
        Renders the raw body for display.
    titles:
        Resolves the parent post title of a comment.
    anonymous_name:
        Placeholder used when no author name can be resolved.

    Raises
    ------
    InvalidContentKind
        If *item* is neither a ``Post`` nor a ``Comment``.
    """
    if isinstance(item, Post):
        username = _lookup_display_name(directory, item.author_id)
        return Message(
            id=item.id,
            user_id=item.author_id,
            username=username or anonymous_name,
            title=item.title,
            content=sanitizer.render(item.body),
        )

    if isinstance(item, Comment):
        if item.author_id > 0:
            username = _lookup_display_name(directory, item.author_id)
        else:
            username = item.author_name or None
        return Message(
            id=item.id,
            user_id=item.author_id,
            username=username or anonymous_name,
            title=None,
            content=sanitizer.render(item.body),
            post_title=_lookup_post_title(titles, item.post_id),
        )

    raise InvalidContentKind(
        f"Cannot normalize {type(item).__name__}: expected Post or Comment"
    )
