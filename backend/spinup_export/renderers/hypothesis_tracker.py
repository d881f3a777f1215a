"""Hypothesis tracker renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..schemas.document import DocumentBlock
from ..schemas.payloads import HypothesisTrackerPayload
from .base import ArtifactRenderer
from .blocks import field, heading2, joined


@dataclass
class HypothesisTrackerRenderer(ArtifactRenderer):
    artifact_type: str = "hypothesis_tracker"
    title: str = "Hypothesis Tracker"
    uses_value_proposition: bool = True

    def blocks(self, data: Mapping[str, Any]) -> list[DocumentBlock]:
        payload = HypothesisTrackerPayload.coerce(data)
        return joined(
            [
                heading2(f"Hypothesis {number}"),
                *field("Assumption", hypothesis.assumption),
                *field("Why we believe this", hypothesis.why_we_believe),
                *field("Experiment designed", hypothesis.experiment),
                *field("Outcome", hypothesis.outcome),
                *field("Validated?", hypothesis.validated),
                *field("Next action", hypothesis.next_action),
            ]
            for number, hypothesis in enumerate(payload.hypotheses, start=1)
        )
