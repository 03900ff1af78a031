"""Public entry points: markup text in, document tree or rendered string out."""

from __future__ import annotations

import logging

from mdlite.block_scanner import classify
from mdlite.exceptions import InvalidInputError
from mdlite.options import ParseOptions
from mdlite.renderer import render, serialize_html, serialize_text
from mdlite.schemas import Document

logger = logging.getLogger(__name__)


def parse(text: str, *, options: ParseOptions | None = None) -> Document:
    """Parse markup text into a document tree.

    Every string is accepted: malformed markup degrades to literal text.

    Args:
        text: Raw markup text.
        options: Parse options. Uses defaults if None.

    Returns:
        The parsed ``Document``.

    Raises:
        InvalidInputError: If ``text`` is not a ``str`` or ``options`` is not
            a ``ParseOptions``.
    """
    _validate_input(text, options)
    return render(classify(text), options=options)


def to_html(text: str, *, options: ParseOptions | None = None) -> str:
    """Parse markup text and render it as an HTML string."""
    return serialize_html(parse(text, options=options))


def to_text(text: str, *, options: ParseOptions | None = None) -> str:
    """Parse markup text and return only its textual content."""
    return serialize_text(parse(text, options=options))


def _validate_input(text: object, options: object) -> None:
    if not isinstance(text, str):
        logger.debug("Rejected input of type %s", type(text).__name__)
        raise InvalidInputError(f"Expected markup text as str, got {type(text).__name__}")
    if options is not None and not isinstance(options, ParseOptions):
        raise InvalidInputError(f"Expected ParseOptions, got {type(options).__name__}")
