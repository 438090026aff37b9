"""Hook bus: the host-owned registry that push sources attach handlers to.

Handlers are called in registration order, each with the arguments passed
to ``emit``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class HookBus:
    """Named hooks with ordered handler lists."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}

    def add_handler(self, hook_name: str, handler: Handler) -> None:
        """Attach *handler* to *hook_name*.  Duplicates are ignored."""
        handlers = self._handlers.setdefault(hook_name, [])
        if handler not in handlers:
            handlers.append(handler)
            logger.debug("Registered handler for hook %s", hook_name)

    def remove_handler(self, hook_name: str, handler: Handler) -> None:
        try:
            self._handlers.get(hook_name, []).remove(handler)
        except ValueError:
            pass

    def handlers(self, hook_name: str) -> list[Handler]:
        return list(self._handlers.get(hook_name, []))

    def emit(self, hook_name: str, *args: Any, **kwargs: Any) -> None:
        """Invoke every handler registered for *hook_name*."""
        for handler in self.handlers(hook_name):
            handler(*args, **kwargs)
