"""Competitive landscape renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..schemas.document import DocumentBlock
from ..schemas.payloads import CompetitiveLandscapePayload
from .base import ArtifactRenderer
from .blocks import table
from .formatting import PLACEHOLDER

COLUMNS = ["Competitor", "Strength", "Weakness", "Our differentiation", "SA relevance"]


@dataclass
class CompetitiveLandscapeRenderer(ArtifactRenderer):
    artifact_type: str = "competitive_landscape"
    title: str = "Competitive Landscape Map"
    uses_value_proposition: bool = True

    def blocks(self, data: Mapping[str, Any]) -> list[DocumentBlock]:
        competitors = CompetitiveLandscapePayload.coerce(data).competitors
        if not competitors:
            return []
        rows = (
            [
                value or PLACEHOLDER
                for value in (c.name, c.strength, c.weakness, c.differentiation, c.sa_relevance)
            ]
            for c in competitors
        )
        return [table(COLUMNS, rows)]
