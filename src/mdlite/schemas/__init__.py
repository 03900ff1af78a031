"""Shared schemas for mdlite."""

from mdlite.schemas.blocks import Blank, Block, Heading, Paragraph
from mdlite.schemas.document import Document, DocumentNode, HeadingNode, ParagraphNode
from mdlite.schemas.inline import Bold, InlineNode, Italic, Text, inline_plain_text

__all__ = [
    "Blank",
    "Block",
    "Bold",
    "Document",
    "DocumentNode",
    "Heading",
    "HeadingNode",
    "InlineNode",
    "Italic",
    "Paragraph",
    "ParagraphNode",
    "Text",
    "inline_plain_text",
]
