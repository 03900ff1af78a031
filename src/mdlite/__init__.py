"""mdlite: convert lightweight markup into a document tree, HTML or text."""

from mdlite.block_scanner import classify
from mdlite.exceptions import InvalidInputError, MdliteError, RenderError
from mdlite.inline_scanner import scan_inline
from mdlite.options import ParseOptions
from mdlite.parser import parse, to_html, to_text
from mdlite.renderer import render, render_html, render_text
from mdlite.schemas import (
    Blank,
    Bold,
    Document,
    Heading,
    HeadingNode,
    Italic,
    Paragraph,
    ParagraphNode,
    Text,
)

__all__ = [
    "Blank",
    "Bold",
    "Document",
    "Heading",
    "HeadingNode",
    "InvalidInputError",
    "Italic",
    "MdliteError",
    "Paragraph",
    "ParagraphNode",
    "ParseOptions",
    "RenderError",
    "Text",
    "classify",
    "parse",
    "render",
    "render_html",
    "render_text",
    "scan_inline",
    "to_html",
    "to_text",
]
