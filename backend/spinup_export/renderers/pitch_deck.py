"""Pitch deck narrative renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..schemas.document import DocumentBlock
from ..schemas.payloads import PitchDeckPayload
from .base import ArtifactRenderer
from .blocks import body, heading2, joined

SLIDES: tuple[tuple[str, str], ...] = (
    ("problem", "1. The Problem"),
    ("solution", "2. Our Solution"),
    ("why_now", "3. Why Now"),
    ("market_size", "4. Market Size"),
    ("business_model", "5. Business Model"),
    ("traction", "6. Traction"),
    ("team", "7. Team"),
    ("competition", "8. Competition"),
    ("financials", "9. Financials"),
    ("the_ask", "10. The Ask"),
)


@dataclass
class PitchDeckRenderer(ArtifactRenderer):
    """Always emits all ten slides, in deck order, whether or not they have content."""

    artifact_type: str = "pitch_deck"
    title: str = "Pitch Deck Narrative"
    uses_value_proposition: bool = True

    def blocks(self, data: Mapping[str, Any]) -> list[DocumentBlock]:
        deck = PitchDeckPayload.coerce(data)
        return joined([heading2(title), body(deck.slide(key).content)] for key, title in SLIDES)
