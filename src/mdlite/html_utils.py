"""HTML helpers shared by the renderer."""

from __future__ import annotations

import re

_ESCAPE_RE = re.compile(r"[&<>\"']")
_ESCAPE_MAP = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}
_TAG_RE = re.compile(r"<[!/a-z].*?>", re.IGNORECASE)


def escape_html(text: str) -> str:
    """Escape characters that carry meaning in HTML text and attribute values."""
    return _ESCAPE_RE.sub(lambda match: _ESCAPE_MAP[match.group(0)], text)


def strip_tags(text: str) -> str:
    """Remove anything that looks like an HTML tag."""
    return _TAG_RE.sub("", text)
