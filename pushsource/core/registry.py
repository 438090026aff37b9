"""Entity type registry backed by configuration."""

from __future__ import annotations

from pushsource.config import PushSourceConfig

ENTITY_TAGS = ("post", "comment", "section")


class StaticEntityTypeRegistry:
    """Maps the fixed tags to deployment-specific entity type names.

    Parameters
    ----------
    mapping:
        ``tag -> name``.  Missing tags default to the tag itself.
    """

    def __init__(self, mapping: dict[str, str] | None = None) -> None:
        self._mapping = {tag: tag for tag in ENTITY_TAGS}
        self._mapping.update(mapping or {})

    @classmethod
    def from_config(cls, config: PushSourceConfig) -> StaticEntityTypeRegistry:
        return cls(config.entity_types())

    def get(self, tag: str) -> str:
        if tag not in ENTITY_TAGS:
            raise KeyError(f"Unknown entity tag: {tag!r}")
        return self._mapping[tag]

    def __repr__(self) -> str:
        return f"StaticEntityTypeRegistry({self._mapping!r})"
