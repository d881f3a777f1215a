"""Renderer registry."""

from __future__ import annotations

from .base import ArtifactRenderer
from .company_name import CompanyNameRenderer
from .competitive_landscape import CompetitiveLandscapeRenderer
from .compliance_checklist import ComplianceChecklistRenderer
from .financial_model import FinancialModelRenderer
from .generic import GenericRenderer
from .hypothesis_tracker import HypothesisTrackerRenderer
from .mvp_definition import MvpDefinitionRenderer
from .pitch_deck import PitchDeckRenderer
from .problem_solution_fit import ProblemSolutionFitRenderer
from .value_proposition import ValuePropositionRenderer
from .weekly_journal import WeeklyJournalRenderer


class RendererRegistry:
    """Resolves renderers by artifact type, falling back to the generic one."""

    def __init__(self) -> None:
        renderers: list[ArtifactRenderer] = [
            CompanyNameRenderer(),
            ValuePropositionRenderer(),
            HypothesisTrackerRenderer(),
            ProblemSolutionFitRenderer(),
            CompetitiveLandscapeRenderer(),
            MvpDefinitionRenderer(),
            PitchDeckRenderer(),
            FinancialModelRenderer(),
            ComplianceChecklistRenderer(),
            WeeklyJournalRenderer(),
        ]
        self._registry: dict[str, ArtifactRenderer] = {renderer.artifact_type: renderer for renderer in renderers}
        self.fallback: ArtifactRenderer = GenericRenderer()

    def resolve(self, artifact_type: str) -> ArtifactRenderer:
        return self._registry.get(artifact_type, self.fallback)

    def has_bespoke(self, artifact_type: str) -> bool:
        return artifact_type in self._registry

    def artifact_types(self) -> list[str]:
        return list(self._registry)


_RENDERER_REGISTRY_SINGLETON: RendererRegistry | None = None


def get_renderer_registry() -> RendererRegistry:
    global _RENDERER_REGISTRY_SINGLETON
    if _RENDERER_REGISTRY_SINGLETON is None:
        _RENDERER_REGISTRY_SINGLETON = RendererRegistry()
    return _RENDERER_REGISTRY_SINGLETON


def resolve(artifact_type: str) -> ArtifactRenderer:
    return get_renderer_registry().resolve(artifact_type)
