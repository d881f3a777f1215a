"""Document block tree produced by renderers and consumed by exporters."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class HeadingBlock(BaseModel):
    """Section heading; level 1 is reserved for the document title."""

    kind: Literal["heading"] = "heading"
    text: str
    level: Literal[1, 2] = 2


class LabelBlock(BaseModel):
    """Bold field caption placed above a body paragraph."""

    kind: Literal["label"] = "label"
    text: str


class BodyBlock(BaseModel):
    kind: Literal["body"] = "body"
    text: str
    bold: bool = False


class StatementBlock(BaseModel):
    """Paragraph opening with a bold lead, e.g. ``Value Proposition: ...``."""

    kind: Literal["statement"] = "statement"
    lead: str
    text: str


class BulletBlock(BaseModel):
    kind: Literal["bullet"] = "bullet"
    text: str


class DividerBlock(BaseModel):
    kind: Literal["divider"] = "divider"


class TableBlock(BaseModel):
    """Grid with a bold header row and an optional bold total row."""

    kind: Literal["table"] = "table"
    header: list[str]
    rows: list[list[str]] = Field(default_factory=list)
    total: list[str] | None = None
    width_pct: int = 100
    compact: bool = False


DocumentBlock = Annotated[
    Union[HeadingBlock, LabelBlock, BodyBlock, StatementBlock, BulletBlock, DividerBlock, TableBlock],
    Field(discriminator="kind"),
]


class Document(BaseModel):
    """Assembled export: shell metadata plus the renderer's blocks."""

    brand: str
    title: str
    subtitle: str
    blocks: list[DocumentBlock] = Field(default_factory=list)
