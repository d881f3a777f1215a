"""Financial model renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..schemas.document import DocumentBlock
from ..schemas.payloads import CostItem, FinancialModelPayload, RevenueStream
from .base import ArtifactRenderer
from .blocks import body, divider, field, heading2, label, table
from .formatting import PLACEHOLDER, format_rand, parse_number, sum_numbers

# (payload key, column caption) for each projection bucket, in table order
REVENUE_BUCKETS: tuple[tuple[str, str], ...] = (
    ("month1", "M1"),
    ("month3", "M3"),
    ("month6", "M6"),
    ("month12", "M12"),
    ("month18", "M18"),
    ("month24", "M24"),
    ("year3", "Year 3"),
    ("year4", "Year 4"),
    ("year5", "Year 5"),
)


def revenue_totals(streams: list[RevenueStream]) -> dict[str, float]:
    """Per-bucket sum over all streams; blank or non-numeric cells count as zero."""
    return {key: sum_numbers(getattr(stream, key) for stream in streams) for key, _ in REVENUE_BUCKETS}


def monthly_cost_total(costs: list[CostItem]) -> float:
    return sum_numbers(cost.monthly for cost in costs)


def _given(value: str | None) -> bool:
    """A metric is shown unless it is blank or numerically zero."""
    return bool(value) and parse_number(value) != 0


def _display(value: str) -> str:
    """Show whole floats the way they were typed, e.g. ``5.0`` as ``5``."""
    number = parse_number(value)
    if number is not None and number.is_integer() and value.strip() == str(number):
        return str(int(number))
    return value


@dataclass
class FinancialModelRenderer(ArtifactRenderer):
    artifact_type: str = "financial_model"
    title: str = "Financial Model"

    def blocks(self, data: Mapping[str, Any]) -> list[DocumentBlock]:
        model = FinancialModelPayload.coerce(data)
        return [
            *self._revenue_section(model.revenue_streams),
            divider(),
            *self._cost_section(model.cost_items),
            divider(),
            *self._assumptions_section(model),
        ]

    def _revenue_section(self, streams: list[RevenueStream]) -> list[DocumentBlock]:
        blocks: list[DocumentBlock] = [heading2("Revenue Projections")]
        if not streams:
            return blocks
        totals = revenue_totals(streams)
        rows = (
            [stream.name or PLACEHOLDER, *(format_rand(getattr(stream, key)) for key, _ in REVENUE_BUCKETS)]
            for stream in streams
        )
        blocks.append(
            table(
                ["Stream", *(caption for _, caption in REVENUE_BUCKETS)],
                rows,
                total=["Total", *(format_rand(totals[key]) for key, _ in REVENUE_BUCKETS)],
                compact=True,
            )
        )
        return blocks

    def _cost_section(self, costs: list[CostItem]) -> list[DocumentBlock]:
        blocks: list[DocumentBlock] = [heading2("Cost Structure (Monthly)")]
        if not costs:
            return blocks
        rows = ([cost.name or PLACEHOLDER, cost.type or PLACEHOLDER, format_rand(cost.monthly)] for cost in costs)
        blocks.append(
            table(
                ["Item", "Type", "Monthly"],
                rows,
                total=["Total", "", format_rand(monthly_cost_total(costs))],
                width_pct=70,
            )
        )
        return blocks

    def _assumptions_section(self, model: FinancialModelPayload) -> list[DocumentBlock]:
        blocks: list[DocumentBlock] = [heading2("Assumptions & Metrics")]
        if _given(model.growth_rate_pct):
            blocks += field("Monthly growth rate", f"{_display(model.growth_rate_pct)}%")
        if _given(model.churn_rate_pct):
            blocks += field("Monthly churn rate", f"{_display(model.churn_rate_pct)}%")
        if _given(model.cac):
            blocks += field("Customer acquisition cost (CAC)", format_rand(model.cac))
        if model.hiring_plan:
            blocks += field("Hiring plan", model.hiring_plan)
        if model.key_assumptions:
            blocks += [divider(), label("Key assumptions"), body(model.key_assumptions)]
        if model.break_even_notes:
            blocks += [divider(), label("Break-even analysis"), body(model.break_even_notes)]
        return blocks
