"""Pydantic models for the render API."""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, Field, field_validator

from mdlite.options import ParseOptions
from mdlite.schemas import Document
from server.server_config import MAX_INPUT_CHARS


class OutputFormat(str, Enum):
    """Enumeration for render output formats."""

    HTML = "html"
    TEXT = "text"
    TREE = "tree"


class RenderRequest(BaseModel):
    """Request model for the /api/render endpoint.

    Attributes
    ----------
    text : str
        The markup text to render.
    output_format : OutputFormat
        Which representation to return.
    bold : bool
        Recognize ``**bold**`` spans.
    italic : bool
        Recognize ``*italic*`` spans.
    header_ids : bool
        Generate ``id`` anchors for headings.
    header_prefix : str
        Prefix for generated heading anchors.

    """

    text: str = Field(..., description="Markup text to render")
    output_format: OutputFormat = Field(default=OutputFormat.HTML, description="Output representation")
    bold: bool = Field(default=True, description="Recognize bold spans")
    italic: bool = Field(default=True, description="Recognize italic spans")
    header_ids: bool = Field(default=False, description="Generate heading anchors")
    header_prefix: str = Field(default="", description="Prefix for heading anchors")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate that ``text`` fits within the configured size limit."""
        if len(v) > MAX_INPUT_CHARS:
            err = f"text exceeds the maximum of {MAX_INPUT_CHARS} characters"
            raise ValueError(err)
        return v

    @field_validator("header_prefix")
    @classmethod
    def validate_header_prefix(cls, v: str) -> str:
        """Strip surrounding whitespace from ``header_prefix``."""
        return v.strip()

    def to_options(self) -> ParseOptions:
        """Build the engine options for this request."""
        return ParseOptions(
            bold=self.bold,
            italic=self.italic,
            header_ids=self.header_ids,
            header_prefix=self.header_prefix,
        )


class RenderSuccessResponse(BaseModel):
    """Success response model for the /api/render endpoint.

    Attributes
    ----------
    output_format : OutputFormat
        Representation that was produced.
    block_count : int
        Number of rendered blocks.
    html : str | None
        Rendered HTML, for the ``html`` format.
    text : str | None
        Plain text, for the ``text`` format.
    document : Document | None
        Document tree, for the ``tree`` format.

    """

    output_format: OutputFormat = Field(..., description="Output representation")
    block_count: int = Field(..., ge=0, description="Number of rendered blocks")
    html: str | None = Field(default=None, description="Rendered HTML")
    text: str | None = Field(default=None, description="Rendered plain text")
    document: Document | None = Field(default=None, description="Rendered document tree")


class RenderErrorResponse(BaseModel):
    """Error response model for the /api/render endpoint.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")


# Union type for API responses
RenderResponse = Union[RenderSuccessResponse, RenderErrorResponse]
