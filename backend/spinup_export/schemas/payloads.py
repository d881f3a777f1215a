"""Typed views over the free-form ``data`` bag stored on each artifact.

Artifact payloads are never validated when saved, so every model here is
built with :meth:`Payload.coerce`, which drops whatever does not fit instead
of rejecting the payload. A wrong-typed field ends up as ``None`` (or its
default) and the renderer shows a placeholder for it.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @classmethod
    def coerce(cls, data: Any):
        """Validate ``data`` best-effort, removing every offending value.

        Each pass deletes all values the previous validation rejected, so the
        candidate shrinks until it validates.
        """
        candidate = copy.deepcopy(dict(data)) if isinstance(data, Mapping) else {}
        while True:
            try:
                return cls.model_validate(candidate)
            except ValidationError as exc:
                paths = {_resolve(candidate, error["loc"]) for error in exc.errors()}
            paths.discard(())
            if not paths:
                return cls()
            # Children of a removed value go with it; siblings are removed
            # from the highest list index down so lower indices stay valid.
            for path in sorted(paths, key=_path_key, reverse=True):
                if not any(path[:depth] in paths for depth in range(1, len(path))):
                    _delete(candidate, path)


def _resolve(container: Any, loc: Sequence[Any]) -> tuple[Any, ...]:
    """Return the longest prefix of ``loc`` that exists in ``container``."""
    path: list[Any] = []
    current = container
    for step in loc:
        if isinstance(current, dict) and step in current:
            current = current[step]
        elif isinstance(current, list) and isinstance(step, int) and 0 <= step < len(current):
            current = current[step]
        else:
            break
        path.append(step)
    return tuple(path)


def _path_key(path: tuple[Any, ...]) -> tuple[tuple[int, Any], ...]:
    return tuple((0, step) if isinstance(step, int) else (1, str(step)) for step in path)


def _delete(container: Any, path: tuple[Any, ...]) -> None:
    parent = container
    for step in path[:-1]:
        parent = parent[step]
    del parent[path[-1]]


# ---------------------------------------------------------------- setup tools


class BarTest(Payload):
    easy_pronounce: bool | None = None
    easy_spell: bool | None = None
    not_confused: bool | None = None
    memorable: bool | None = None
    score: str | None = None


class SearchOutcome(Payload):
    outcome: str | None = None
    notes: str | None = None


class CompanyNamePayload(Payload):
    bar_test: BarTest = Field(default_factory=BarTest)
    name_search: SearchOutcome = Field(default_factory=SearchOutcome)
    trademark_search: SearchOutcome = Field(default_factory=SearchOutcome)
    domain_check: SearchOutcome = Field(default_factory=SearchOutcome)
    final_name: str | None = None


class ValuePropositionPayload(Payload):
    solution: str | None = None
    customer: str | None = None
    benefit: str | None = None
    how_it_works: str | None = None
    improvement: str | None = None


# ---------------------------------------------------------------- validate


class Hypothesis(Payload):
    assumption: str | None = None
    why_we_believe: str | None = None
    experiment: str | None = None
    outcome: str | None = None
    validated: str | None = None
    next_action: str | None = None


class HypothesisTrackerPayload(Payload):
    hypotheses: list[Hypothesis] = Field(default_factory=list)


class ProblemSolutionFitPayload(Payload):
    who_has_problem: str | None = None
    what_is_problem: str | None = None
    how_they_solve_now: str | None = None
    why_current_fails: str | None = None
    our_solution: str | None = None
    ten_x_advantage: str | None = None
    evidence_so_far: str | None = None


class Competitor(Payload):
    name: str | None = None
    strength: str | None = None
    weakness: str | None = None
    differentiation: str | None = None
    sa_relevance: str | None = None


class CompetitiveLandscapePayload(Payload):
    competitors: list[Competitor] = Field(default_factory=list)


# ---------------------------------------------------------------- build / sell


class MvpFeature(Payload):
    name: str | None = None
    type: str | None = None


class MvpDefinitionPayload(Payload):
    core_value_prop: str | None = None
    features: list[MvpFeature] = Field(default_factory=list)
    not_building: str | None = None
    success_metric: str | None = None
    first_user: str | None = None


class Slide(Payload):
    content: str | None = None


class PitchDeckPayload(Payload):
    problem: Slide = Field(default_factory=Slide)
    solution: Slide = Field(default_factory=Slide)
    why_now: Slide = Field(default_factory=Slide)
    market_size: Slide = Field(default_factory=Slide)
    business_model: Slide = Field(default_factory=Slide)
    traction: Slide = Field(default_factory=Slide)
    team: Slide = Field(default_factory=Slide)
    competition: Slide = Field(default_factory=Slide)
    financials: Slide = Field(default_factory=Slide)
    the_ask: Slide = Field(default_factory=Slide)

    def slide(self, key: str) -> Slide:
        return getattr(self, key)


class RevenueStream(Payload):
    name: str | None = None
    month1: str | None = None
    month3: str | None = None
    month6: str | None = None
    month12: str | None = None
    month18: str | None = None
    month24: str | None = None
    year3: str | None = None
    year4: str | None = None
    year5: str | None = None


class CostItem(Payload):
    name: str | None = None
    type: str | None = None
    monthly: str | None = None


class FinancialModelPayload(Payload):
    revenue_streams: list[RevenueStream] = Field(default_factory=list)
    cost_items: list[CostItem] = Field(default_factory=list)
    growth_rate_pct: str | None = None
    churn_rate_pct: str | None = None
    cac: str | None = None
    hiring_plan: str | None = None
    key_assumptions: str | None = None
    break_even_notes: str | None = None


class ComplianceItem(Payload):
    status: str | None = None
    notes: str | None = None


class ComplianceChecklistPayload(Payload):
    items: dict[str, ComplianceItem] = Field(default_factory=dict)


# ---------------------------------------------------------------- cross-phase


class JournalEntry(Payload):
    week_start: str | None = None
    what_we_did: str | None = None
    what_we_learned: str | None = None
    what_changed: str | None = None
    blockers: str | None = None
    next_week_priority: str | None = None


class WeeklyJournalPayload(Payload):
    entries: list[JournalEntry] = Field(default_factory=list)
