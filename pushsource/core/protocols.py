"""Collaborator protocols consumed by the push source core.

The core never reaches into host globals; every lookup it needs is one of
these injected interfaces.  Any object with the right methods satisfies
them, so tests pass plain fakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pushsource.models.content import Comment
    from pushsource.models.delivery import Delivery, Message, Target


@runtime_checkable
class UserDirectory(Protocol):
    """Resolves a user id to a display name."""

    def display_name(self, user_id: int) -> str | None:
        """Return the user's display name, or ``None`` if unknown."""
        ...


@runtime_checkable
class EntityTypeRegistry(Protocol):
    """Maps the fixed tags ``post``, ``comment``, ``section`` to the
    deployment's entity type names."""

    def get(self, tag: str) -> str:
        ...


@runtime_checkable
class TaxonomyLookup(Protocol):
    """Lists the taxonomy terms attached to an object."""

    def terms_for(self, object_id: int, taxonomy: str) -> list[int]:
        """Return term ids in the host's order.

        Raises
        ------
        TaxonomyLookupError
            If the terms cannot be listed.
        """
        ...


@runtime_checkable
class ContentSanitizer(Protocol):
    """Reduces raw markup to notification-sized display text."""

    def render(self, raw_body: str) -> str:
        ...


@runtime_checkable
class PostTitleLookup(Protocol):
    """Resolves a post id to its title."""

    def title_for(self, post_id: int) -> str | None:
        ...


@runtime_checkable
class CommentStore(Protocol):
    """Fetches a stored comment record back from the host."""

    def get(self, comment_id: int) -> Comment | None:
        ...


@runtime_checkable
class DeliverySink(Protocol):
    """Receives normalized messages for push delivery.

    Fire-and-forget from the core's perspective: queueing, retry and
    transport belong to the implementation.
    """

    def deliver(
        self, message: Message, targets: list[Target], object_type: str = ""
    ) -> Delivery:
        ...
