"""Render classified blocks into a document tree, HTML or plain text."""

from __future__ import annotations

import logging
from typing import Iterable

from mdlite.exceptions import RenderError
from mdlite.html_utils import escape_html
from mdlite.inline_scanner import scan_inline
from mdlite.options import ParseOptions
from mdlite.schemas import (
    Blank,
    Block,
    Bold,
    Document,
    Heading,
    HeadingNode,
    Italic,
    Paragraph,
    ParagraphNode,
    Text,
    inline_plain_text,
)
from mdlite.slugger import Slugger

logger = logging.getLogger(__name__)


def render(blocks: Iterable[Block], *, options: ParseOptions | None = None) -> Document:
    """Build the document tree for ``blocks``.

    Headings and paragraphs become nodes holding their scanned inline
    content; blank blocks are separators and produce no node.

    Args:
        blocks: Classified blocks in document order.
        options: Rendering options. Uses defaults if None.

    Returns:
        The rendered ``Document``.
    """
    opts = options or ParseOptions()
    slugger = Slugger() if opts.header_ids else None
    nodes: list[HeadingNode | ParagraphNode] = []

    for block in blocks:
        if isinstance(block, Blank):
            continue
        if not isinstance(block, (Heading, Paragraph)):
            raise RenderError(f"Unsupported block type: {type(block).__name__}")

        children = scan_inline(block.content, bold=opts.bold, italic=opts.italic)
        if isinstance(block, Heading):
            anchor = None
            if slugger is not None:
                anchor = opts.header_prefix + slugger.slug(inline_plain_text(children))
            nodes.append(HeadingNode(level=block.level, anchor=anchor, children=children))
        else:
            nodes.append(ParagraphNode(children=children))

    logger.debug("Rendered %d block nodes", len(nodes))
    return Document(blocks=nodes)


def render_html(blocks: Iterable[Block], *, options: ParseOptions | None = None) -> str:
    """Render ``blocks`` to an HTML string."""
    return serialize_html(render(blocks, options=options))


def render_text(blocks: Iterable[Block], *, options: ParseOptions | None = None) -> str:
    """Render ``blocks`` to plain text, one line per block."""
    return serialize_text(render(blocks, options=options))


def serialize_html(document: Document) -> str:
    """Serialize a document tree to HTML.

    Every block ends with a newline. Text and attribute values are escaped.
    """
    parts: list[str] = []
    for node in document.blocks:
        if not isinstance(node, (HeadingNode, ParagraphNode)):
            raise RenderError(f"Unsupported document node: {type(node).__name__}")

        inner = _serialize_inline(node.children)
        if isinstance(node, HeadingNode):
            attrs = f' id="{escape_html(node.anchor)}"' if node.anchor is not None else ""
            parts.append(f"<{node.tag}{attrs}>{inner}</{node.tag}>\n")
        else:
            parts.append(f"<p>{inner}</p>\n")
    return "".join(parts)


def serialize_text(document: Document) -> str:
    """Serialize a document tree to plain text without any markup."""
    lines: list[str] = []
    for node in document.blocks:
        if not isinstance(node, (HeadingNode, ParagraphNode)):
            raise RenderError(f"Unsupported document node: {type(node).__name__}")
        lines.append(_serialize_inline_text(node.children))
    return "\n".join(lines)


def _serialize_inline(nodes: Iterable[Text | Bold | Italic]) -> str:
    return "".join(_serialize_inline_node(node) for node in nodes)


def _serialize_inline_node(node: Text | Bold | Italic) -> str:
    if isinstance(node, Text):
        return escape_html(node.text)
    if isinstance(node, Bold):
        return f"<strong>{_serialize_inline(node.children)}</strong>"
    if isinstance(node, Italic):
        return f"<em>{_serialize_inline(node.children)}</em>"
    raise RenderError(f"Unsupported inline node: {type(node).__name__}")


def _serialize_inline_text(nodes: Iterable[Text | Bold | Italic]) -> str:
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, Text):
            parts.append(node.text)
        elif isinstance(node, (Bold, Italic)):
            parts.append(_serialize_inline_text(node.children))
        else:
            raise RenderError(f"Unsupported inline node: {type(node).__name__}")
    return "".join(parts)
