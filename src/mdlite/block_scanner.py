"""Split markup text into lines and classify each one as a block."""

from __future__ import annotations

import logging
import re

from mdlite.config import HEADING_MARKER, MAX_HEADING_INDENT, MAX_HEADING_LEVEL
from mdlite.schemas import Blank, Block, Heading, Paragraph

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_HEADING_RE = re.compile(
    rf"^ {{0,{MAX_HEADING_INDENT}}}(?P<markers>{re.escape(HEADING_MARKER)}+)\s+(?P<text>.*)$",
    re.DOTALL,
)
_CLOSING_SEQUENCE_RE = re.compile(rf"(?:^|\s+){re.escape(HEADING_MARKER)}+$")


def split_lines(text: str) -> list[str]:
    """Split text on line terminators.

    A single trailing terminator does not produce an extra empty line, so
    ``"a\\n"`` yields ``["a"]`` while ``"\\n"`` yields ``[""]``.
    """
    if not text:
        return []
    lines = _LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def classify(text: str) -> list[Block]:
    """Classify every line of ``text`` as a heading, paragraph or blank block.

    Args:
        text: Raw markup text.

    Returns:
        Blocks in document order, exactly one per line.
    """
    blocks = [classify_line(line) for line in split_lines(text)]
    logger.debug("Classified %d lines", len(blocks))
    return blocks


def classify_line(line: str) -> Block:
    """Classify a single line (without its terminator)."""
    if not line.strip():
        return Blank()

    match = _HEADING_RE.match(line)
    if match is None:
        return Paragraph(content=line.strip())

    markers = match.group("markers")
    heading_text = _strip_closing_sequence(match.group("text").strip())

    if len(markers) <= MAX_HEADING_LEVEL:
        return Heading(level=len(markers), content=heading_text)

    # Markers past the last level are literal text.
    excess = markers[MAX_HEADING_LEVEL:]
    content = f"{excess} {heading_text}" if heading_text else excess
    return Heading(level=MAX_HEADING_LEVEL, content=content)


def _strip_closing_sequence(text: str) -> str:
    return _CLOSING_SEQUENCE_RE.sub("", text).rstrip()
