"""Dict-backed collaborators for replays, demos and tests."""

from __future__ import annotations

from pushsource.core.errors import TaxonomyLookupError
from pushsource.models.content import Comment


class InMemoryUserDirectory:
    def __init__(self, users: dict[int, str] | None = None) -> None:
        self._users = dict(users or {})

    def add(self, user_id: int, display_name: str) -> None:
        self._users[user_id] = display_name

    def display_name(self, user_id: int) -> str | None:
        return self._users.get(user_id)


class InMemoryTaxonomy:
    """Term assignments keyed by ``(object_id, taxonomy)``.

    Objects listed in ``failing`` raise ``TaxonomyLookupError``, mirroring a
    host taxonomy that is not registered or not readable.
    """

    def __init__(
        self,
        terms: dict[tuple[int, str], list[int]] | None = None,
        failing: set[int] | None = None,
    ) -> None:
        self._terms = {key: list(ids) for key, ids in (terms or {}).items()}
        self._failing = set(failing or ())

    def assign(self, object_id: int, taxonomy: str, term_ids: list[int]) -> None:
        self._terms[(object_id, taxonomy)] = list(term_ids)

    def fail_for(self, object_id: int) -> None:
        self._failing.add(object_id)

    def terms_for(self, object_id: int, taxonomy: str) -> list[int]:
        if object_id in self._failing:
            raise TaxonomyLookupError(
                f"Cannot list {taxonomy!r} terms for object {object_id}"
            )
        return list(self._terms.get((object_id, taxonomy), []))


class InMemoryPostTitles:
    def __init__(self, titles: dict[int, str] | None = None) -> None:
        self._titles = dict(titles or {})

    def add(self, post_id: int, title: str) -> None:
        self._titles[post_id] = title

    def title_for(self, post_id: int) -> str | None:
        return self._titles.get(post_id)


class InMemoryCommentStore:
    def __init__(self, comments: list[Comment] | None = None) -> None:
        self._comments = {c.id: c for c in comments or []}

    def add(self, comment: Comment) -> None:
        self._comments[comment.id] = comment

    def get(self, comment_id: int) -> Comment | None:
        return self._comments.get(comment_id)
