"""Rendered document tree models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from mdlite.schemas.inline import InlineNode, inline_plain_text


class HeadingNode(BaseModel):
    """A rendered heading with its inline children."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=6)
    anchor: str | None = None
    children: list[InlineNode] = Field(default_factory=list)

    @property
    def tag(self) -> str:
        return f"h{self.level}"

    def plain_text(self) -> str:
        return inline_plain_text(self.children)


class ParagraphNode(BaseModel):
    """A rendered paragraph with its inline children."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["paragraph"] = "paragraph"
    children: list[InlineNode] = Field(default_factory=list)

    @property
    def tag(self) -> str:
        return "p"

    def plain_text(self) -> str:
        return inline_plain_text(self.children)


DocumentNode = Annotated[Union[HeadingNode, ParagraphNode], Field(discriminator="kind")]


class Document(BaseModel):
    """Ordered sequence of rendered blocks."""

    model_config = ConfigDict(frozen=True)

    blocks: list[DocumentNode] = Field(default_factory=list)

    def plain_text(self) -> str:
        return "\n".join(block.plain_text() for block in self.blocks)
