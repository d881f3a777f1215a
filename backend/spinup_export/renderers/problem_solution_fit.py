"""Problem-solution fit canvas renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..schemas.document import DocumentBlock
from ..schemas.payloads import ProblemSolutionFitPayload
from .base import ArtifactRenderer
from .blocks import field, joined

CANVAS_QUESTIONS: tuple[tuple[str, str], ...] = (
    ("who_has_problem", "Who has the problem?"),
    ("what_is_problem", "What is the problem?"),
    ("how_they_solve_now", "How do they currently solve it?"),
    ("why_current_fails", "Why do current solutions fail?"),
    ("our_solution", "Our proposed solution"),
    ("ten_x_advantage", "The 10x advantage"),
    ("evidence_so_far", "Evidence so far"),
)


@dataclass
class ProblemSolutionFitRenderer(ArtifactRenderer):
    artifact_type: str = "problem_solution_fit"
    title: str = "Problem-Solution Fit Canvas"
    uses_value_proposition: bool = True

    def blocks(self, data: Mapping[str, Any]) -> list[DocumentBlock]:
        canvas = ProblemSolutionFitPayload.coerce(data)
        return joined(field(question, getattr(canvas, key)) for key, question in CANVAS_QUESTIONS)
