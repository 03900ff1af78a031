"""Scan block content for bold and italic emphasis spans.

The scanner walks the text once, left to right, keeping a stack of pending
opening delimiters. Both ``*`` and ``_`` mark emphasis. A delimiter run of
one marker is an italic candidate; a run of two or more is a bold candidate
made of its first two markers, with the rest of the run kept as literal text.
A span is closed only by the marker character that opened it.

Whether a candidate may open or close a span depends on its neighbours: it
can open only when followed by a non-whitespace character and close only
when preceded by one. An ``_`` run inside a word (``snake_case``) neither
opens nor closes. Anything that cannot be paired is emitted as literal
text, so the scanner accepts every input string.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Iterable, Literal, Union

from mdlite.config import EMPHASIS_MARKERS, ESCAPABLE_CHARS, ESCAPE_CHAR, UNDERSCORE_MARKER
from mdlite.schemas import Bold, Italic, Text

logger = logging.getLogger(__name__)

DelimiterKind = Literal["bold", "italic"]

_BOLD: Final = "bold"
_ITALIC: Final = "italic"


@dataclass
class _Delimiter:
    """An opening delimiter still waiting for its closer."""

    kind: DelimiterKind
    raw: str


_Pending = Union[Text, Bold, Italic, _Delimiter]


def scan_inline(text: str, *, bold: bool = True, italic: bool = True) -> list[Text | Bold | Italic]:
    """Scan ``text`` into an ordered sequence of inline nodes.

    Args:
        text: Content of a single block.
        bold: If False, ``**`` and ``__`` runs are kept as literal text.
        italic: If False, single ``*`` and ``_`` runs are kept as literal text.

    Returns:
        Inline nodes in source order. Adjacent text is merged into a single
        ``Text`` node.
    """
    return _InlineScanner(text, bold=bold, italic=italic).scan()


class _InlineScanner:
    def __init__(self, text: str, *, bold: bool, italic: bool) -> None:
        self._text = text
        self._enabled = {_BOLD: bold, _ITALIC: italic}
        self._buffer: list[str] = []
        self._output: list[_Pending] = []
        # Indices into ``_output`` of unmatched openers, innermost last.
        self._openers: list[int] = []

    def scan(self) -> list[Text | Bold | Italic]:
        text = self._text
        length = len(text)
        pos = 0
        while pos < length:
            char = text[pos]
            if char == ESCAPE_CHAR and pos + 1 < length and text[pos + 1] in ESCAPABLE_CHARS:
                self._buffer.append(text[pos + 1])
                pos += 2
                continue
            if char not in EMPHASIS_MARKERS:
                self._buffer.append(char)
                pos += 1
                continue
            end = pos
            while end < length and text[end] == char:
                end += 1
            self._handle_run(pos, end)
            pos = end

        self._flush()
        for index in self._openers:
            self._degrade(index)
        self._openers.clear()
        return _merge_text(self._output)

    def _handle_run(self, start: int, end: int) -> None:
        text = self._text
        kind: DelimiterKind = _BOLD if end - start >= 2 else _ITALIC
        delimiter_end = start + (2 if kind == _BOLD else 1)
        raw = text[start:delimiter_end]
        trailing = text[delimiter_end:end]

        if not self._enabled[kind]:
            self._buffer.append(text[start:end])
            return

        before = text[start - 1] if start > 0 else ""
        after = text[end] if end < len(text) else ""
        can_open = bool(after) and not after.isspace()
        can_close = bool(before) and not before.isspace()
        if raw[0] == UNDERSCORE_MARKER:
            can_open = can_open and not before.isalnum()
            can_close = can_close and not after.isalnum()

        opener = self._find_opener(kind)
        if can_close and opener is not None and self._opener_raw(opener) == raw:
            self._flush()
            self._close(opener, kind)
        elif can_open:
            self._flush()
            if opener is not None:
                # A kind never nests inside itself: the newer opener wins.
                self._degrade(self._openers.pop(opener))
            self._openers.append(len(self._output))
            self._output.append(_Delimiter(kind=kind, raw=raw))
        else:
            self._buffer.append(raw)

        if trailing:
            self._buffer.append(trailing)

    def _find_opener(self, kind: DelimiterKind) -> int | None:
        for stack_pos in range(len(self._openers) - 1, -1, -1):
            pending = self._output[self._openers[stack_pos]]
            if isinstance(pending, _Delimiter) and pending.kind == kind:
                return stack_pos
        return None

    def _opener_raw(self, stack_pos: int) -> str:
        pending = self._output[self._openers[stack_pos]]
        return pending.raw if isinstance(pending, _Delimiter) else ""

    def _close(self, stack_pos: int, kind: DelimiterKind) -> None:
        opener_index = self._openers[stack_pos]
        for index in self._openers[stack_pos + 1 :]:
            self._degrade(index)
        del self._openers[stack_pos:]

        children = _merge_text(self._output[opener_index + 1 :])
        node = Bold(children=children) if kind == _BOLD else Italic(children=children)
        self._output[opener_index:] = [node]

    def _degrade(self, index: int) -> None:
        pending = self._output[index]
        if isinstance(pending, _Delimiter):
            logger.debug("Unmatched %s delimiter kept as text", pending.kind)
            self._output[index] = Text(text=pending.raw)

    def _flush(self) -> None:
        if self._buffer:
            self._output.append(Text(text="".join(self._buffer)))
            self._buffer.clear()


def _merge_text(items: Iterable[_Pending]) -> list[Text | Bold | Italic]:
    merged: list[Text | Bold | Italic] = []
    for item in items:
        if isinstance(item, _Delimiter):
            item = Text(text=item.raw)
        if isinstance(item, Text):
            if not item.text:
                continue
            if merged and isinstance(merged[-1], Text):
                merged[-1] = Text(text=merged[-1].text + item.text)
                continue
        merged.append(item)
    return merged
