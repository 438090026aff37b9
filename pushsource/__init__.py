"""pushsource: push notification fan-out for new posts and approved comments.

Listens for content insertion events from a CMS host, normalizes each new
post or comment into a ``Message``, computes the subscription targets it
fans out to, and hands both to a delivery sink.
"""

__version__ = "0.1.0"
__description__ = "Push notification fan-out for new posts and approved comments"

from pushsource.core.dispatcher import EventDispatcher
from pushsource.models.delivery import Delivery, Message, Target
from pushsource.source import PushSource

__all__ = ["EventDispatcher", "PushSource", "Message", "Target", "Delivery", "__version__"]
