"""Target resolver: computes the subscriber groups for a piece of content.

Posts fan out to every section (taxonomy term) they are filed under.
Top-level comments fan out to the post's subscribers; replies fan out to
the parent comment's subscribers only.
"""

from __future__ import annotations

import logging

from pushsource.core.errors import TaxonomyLookupError
from pushsource.core.protocols import EntityTypeRegistry, TaxonomyLookup
from pushsource.models.content import Comment, Post
from pushsource.models.delivery import Target

logger = logging.getLogger(__name__)


def resolve_targets(
    item: object,
    registry: EntityTypeRegistry,
    taxonomy: TaxonomyLookup,
) -> list[Target]:
    """Return the ordered subscription targets for *item*.

    A failed taxonomy lookup yields no targets rather than an error, so the
    post still produces its message.  Unknown content yields ``[]``.
    """
    if isinstance(item, Post):
        return _post_targets(item, registry, taxonomy)

    if isinstance(item, Comment):
        if item.parent_comment_id == 0:
            return [Target(entity_type=registry.get("post"), entity_id=item.post_id)]
        return [
            Target(
                entity_type=registry.get("comment"),
                entity_id=item.parent_comment_id,
            )
        ]

    return []


def _post_targets(
    post: Post, registry: EntityTypeRegistry, taxonomy: TaxonomyLookup
) -> list[Target]:
    if post.post_type != registry.get("post"):
        return []

    section_type = registry.get("section")
    try:
        term_ids = taxonomy.terms_for(post.id, section_type)
        if not isinstance(term_ids, (list, tuple)):
            raise TaxonomyLookupError(
                f"expected a list of term ids, got {type(term_ids).__name__}"
            )
        return [
            Target(entity_type=section_type, entity_id=int(term_id))
            for term_id in term_ids
        ]
    except Exception as exc:  # noqa: BLE001
        logger.warning(
            "Taxonomy lookup failed for post %s (%s): %s; no section targets",
            post.id,
            section_type,
            exc,
        )
        return []
