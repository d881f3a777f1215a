"""Value proposition statement renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..schemas.document import DocumentBlock
from ..schemas.payloads import ValuePropositionPayload
from .base import ArtifactRenderer
from .blocks import body, divider, field, value_proposition_sentence


@dataclass
class ValuePropositionRenderer(ArtifactRenderer):
    """Builds the statement from the artifact's own fields, not the team's."""

    artifact_type: str = "value_proposition"
    title: str = "Value Proposition Statement"

    def blocks(self, data: Mapping[str, Any]) -> list[DocumentBlock]:
        vp = ValuePropositionPayload.coerce(data)
        sentence = value_proposition_sentence(vp.solution, vp.customer, vp.benefit, vp.how_it_works, vp.improvement)
        return [
            body(sentence),
            divider(),
            *field("Solution", vp.solution),
            *field("Customer", vp.customer),
            *field("Benefit", vp.benefit),
            *field("How it works", vp.how_it_works),
            *field("Improvement over alternatives", vp.improvement),
        ]
