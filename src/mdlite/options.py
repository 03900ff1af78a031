"""Call-time options for parsing and rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseOptions:
    """Options for a single parse call.

    Attributes:
        bold: If True, ``**`` runs are recognized as bold delimiters.
        italic: If True, single ``*`` runs are recognized as italic delimiters.
        header_ids: If True, headings get an ``id`` anchor built from their text.
        header_prefix: String prepended to every generated heading anchor.
    """

    bold: bool = True
    italic: bool = True
    header_ids: bool = False
    header_prefix: str = ""
