"""Inline node models produced by the inline scanner."""

from __future__ import annotations

from typing import Annotated, Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Text(BaseModel):
    """A literal run of text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str

    def plain_text(self) -> str:
        return self.text


class Bold(BaseModel):
    """Strong emphasis wrapping its children."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bold"] = "bold"
    children: list[InlineNode] = Field(default_factory=list)

    def plain_text(self) -> str:
        return inline_plain_text(self.children)


class Italic(BaseModel):
    """Emphasis wrapping its children."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["italic"] = "italic"
    children: list[InlineNode] = Field(default_factory=list)

    def plain_text(self) -> str:
        return inline_plain_text(self.children)


InlineNode = Annotated[Union[Text, Bold, Italic], Field(discriminator="kind")]

Bold.model_rebuild()
Italic.model_rebuild()


def inline_plain_text(nodes: Iterable[Text | Bold | Italic]) -> str:
    """Concatenate the text of an inline sequence, ignoring emphasis."""
    return "".join(node.plain_text() for node in nodes)
