"""Block builders shared by all renderers."""

from __future__ import annotations

from typing import Iterable

from ..schemas.artifact import ValueProposition
from ..schemas.document import (
    BodyBlock,
    BulletBlock,
    DividerBlock,
    DocumentBlock,
    HeadingBlock,
    LabelBlock,
    StatementBlock,
    TableBlock,
)
from .formatting import BLANK, PLACEHOLDER


def heading1(text: str) -> HeadingBlock:
    return HeadingBlock(text=text, level=1)


def heading2(text: str) -> HeadingBlock:
    return HeadingBlock(text=text, level=2)


def label(text: str) -> LabelBlock:
    return LabelBlock(text=text)


def body(text: str | None) -> BodyBlock:
    """Body paragraph; empty or missing text becomes the placeholder dash."""
    return BodyBlock(text=text or PLACEHOLDER)


def field(caption: str, value: str | None) -> list[DocumentBlock]:
    return [label(caption), body(value)]


def bullet(text: str) -> BulletBlock:
    return BulletBlock(text=text)


def divider() -> DividerBlock:
    return DividerBlock()


def table(
    header: list[str],
    rows: Iterable[list[str]],
    *,
    total: list[str] | None = None,
    width_pct: int = 100,
    compact: bool = False,
) -> TableBlock:
    return TableBlock(header=header, rows=list(rows), total=total, width_pct=width_pct, compact=compact)


def value_proposition_sentence(
    solution: str | None,
    customer: str | None,
    benefit: str | None,
    how_it_works: str | None,
    improvement: str | None,
) -> str:
    """Our product X helps Y achieve Z by W, an improvement of V over current options."""
    solution, customer, benefit, how_it_works, improvement = (
        BLANK if part is None else part for part in (solution, customer, benefit, how_it_works, improvement)
    )
    return (
        f"Our product {solution} helps {customer} achieve {benefit} by {how_it_works}, "
        f"an improvement of {improvement} over current options."
    )


def value_proposition_blocks(vp: ValueProposition | None) -> list[DocumentBlock]:
    """Lead-in statement plus divider, or nothing when the team has no value proposition."""
    if vp is None:
        return []
    sentence = value_proposition_sentence(vp.solution, vp.customer, vp.benefit, vp.how_it_works, vp.improvement)
    return [StatementBlock(lead="Value Proposition: ", text=sentence), divider()]


def joined(sections: Iterable[list[DocumentBlock]]) -> list[DocumentBlock]:
    """Concatenate block groups with a divider between consecutive groups."""
    blocks: list[DocumentBlock] = []
    for index, section in enumerate(sections):
        if index:
            blocks.append(divider())
        blocks.extend(section)
    return blocks
