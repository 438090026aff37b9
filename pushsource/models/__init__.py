"""pushsource data models: all Pydantic v2, all frozen (immutable)."""

from pushsource.models.content import Comment, ContentItem, ContentKind, Post
from pushsource.models.delivery import Delivery, Message, Target
from pushsource.models.events import LifecycleEvent, LifecycleKind

__all__ = [
    # content
    "ContentKind",
    "ContentItem",
    "Post",
    "Comment",
    # events
    "LifecycleKind",
    "LifecycleEvent",
    # delivery
    "Message",
    "Target",
    "Delivery",
]
