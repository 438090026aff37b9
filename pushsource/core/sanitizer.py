"""HTML sanitizer: reduces post and comment markup to notification text."""

from __future__ import annotations

from bs4 import BeautifulSoup

ELLIPSIS = "…"


class HtmlContentSanitizer:
    """Strips markup, collapses whitespace and truncates to ``max_length``.

    Truncation prefers the last word boundary before the limit and appends
    an ellipsis.  A ``max_length`` of ``0`` disables truncation.
    """

    def __init__(self, max_length: int = 140) -> None:
        self.max_length = max_length

    def render(self, raw_body: str) -> str:
        if not raw_body:
            return ""

        soup = BeautifulSoup(raw_body, "html.parser")
        for element in soup(["script", "style"]):
            element.decompose()

        text = " ".join(soup.get_text(separator=" ").split())
        return self._truncate(text)

    def _truncate(self, text: str) -> str:
        if self.max_length <= 0 or len(text) <= self.max_length:
            return text

        cut = text[: self.max_length - 1]
        boundary = cut.rfind(" ")
        if boundary > 0:
            cut = cut[:boundary]
        return cut.rstrip() + ELLIPSIS
