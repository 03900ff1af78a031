"""Block models produced by the line classifier."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Heading(BaseModel):
    """A heading line with its marker run stripped."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=6)
    content: str = ""


class Paragraph(BaseModel):
    """A line of plain paragraph text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["paragraph"] = "paragraph"
    content: str


class Blank(BaseModel):
    """An empty or whitespace-only line."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["blank"] = "blank"


Block = Annotated[Union[Heading, Paragraph, Blank], Field(discriminator="kind")]
