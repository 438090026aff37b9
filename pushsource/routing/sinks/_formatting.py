"""Shared formatting helpers for notification sinks."""

from __future__ import annotations

from pushsource.models.delivery import Message


def notification_title(message: Message) -> str:
    """Return the headline shown for a message.

    Posts use their own title; comments read ``"<user> on <post title>"``.

    Examples
    --------
    >>> notification_title(Message(id=1, user_id=0, username="Bo",
    ...                            post_title="Hello"))
    'Bo on Hello'
    """
    if message.title:
        return message.title
    if message.post_title:
        return f"{message.username} on {message.post_title}"
    return message.username


def notification_body(message: Message) -> str:
    """Return the body text, prefixed with the author for posts."""
    if message.title:
        return f"{message.username}: {message.content}" if message.content else message.username
    return message.content
