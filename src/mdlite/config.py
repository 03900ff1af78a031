"""Engine constants for mdlite.

The engine reads no environment variables; per-call behavior is selected with
``ParseOptions``. Server settings live in ``server.server_config``.
"""

from __future__ import annotations

from typing import Final

HEADING_MARKER: Final[str] = "#"
ASTERISK_MARKER: Final[str] = "*"
UNDERSCORE_MARKER: Final[str] = "_"
EMPHASIS_MARKERS: Final[frozenset[str]] = frozenset({ASTERISK_MARKER, UNDERSCORE_MARKER})
ESCAPE_CHAR: Final[str] = "\\"
ESCAPABLE_CHARS: Final[frozenset[str]] = frozenset({ESCAPE_CHAR, HEADING_MARKER}) | EMPHASIS_MARKERS

MAX_HEADING_LEVEL: Final[int] = 6
# Indentation allowed in front of a heading marker run.
MAX_HEADING_INDENT: Final[int] = 3
