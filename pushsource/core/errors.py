"""Exception hierarchy for the push source core."""

from __future__ import annotations


class PushSourceError(Exception):
    """Base exception for all push source errors."""


class InvalidContentKind(PushSourceError, TypeError):
    """Raised when an object is neither a post nor a comment."""


class TaxonomyLookupError(PushSourceError):
    """Raised by a taxonomy lookup that cannot list an object's terms."""
