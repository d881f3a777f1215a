"""Artifact-level schemas: team value proposition and the tool catalog."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict


class ArtifactType(str, Enum):
    """Artifact types with a bespoke document layout."""

    COMPANY_NAME = "company_name"
    VALUE_PROPOSITION = "value_proposition"
    HYPOTHESIS_TRACKER = "hypothesis_tracker"
    PROBLEM_SOLUTION_FIT = "problem_solution_fit"
    COMPETITIVE_LANDSCAPE = "competitive_landscape"
    MVP_DEFINITION = "mvp_definition"
    PITCH_DECK = "pitch_deck"
    FINANCIAL_MODEL = "financial_model"
    COMPLIANCE_CHECKLIST = "compliance_checklist"
    WEEKLY_JOURNAL = "weekly_journal"


Phase = Literal["setup", "validate", "build_minimum", "sell_iterate", "scale", "cross_phase"]


class ValueProposition(BaseModel):
    """Team-level value proposition used to enrich several exports."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    solution: str | None = None
    customer: str | None = None
    benefit: str | None = None
    how_it_works: str | None = None
    improvement: str | None = None


class ArtifactTypeInfo(BaseModel):
    id: str
    label: str
    phase: Phase


ARTIFACT_CATALOG: tuple[ArtifactTypeInfo, ...] = (
    ArtifactTypeInfo(id="company_name", label="Company Name Checker", phase="setup"),
    ArtifactTypeInfo(id="value_proposition", label="Value Proposition", phase="setup"),
    ArtifactTypeInfo(id="hypothesis_tracker", label="Hypothesis Tracker", phase="validate"),
    ArtifactTypeInfo(id="interview_scripts", label="Customer Interview Scripts", phase="validate"),
    ArtifactTypeInfo(id="problem_solution_fit", label="Problem-Solution Fit Canvas", phase="validate"),
    ArtifactTypeInfo(id="competitive_landscape", label="Competitive Landscape Map", phase="validate"),
    ArtifactTypeInfo(id="mvp_definition", label="MVP Definition", phase="build_minimum"),
    ArtifactTypeInfo(id="unit_economics", label="Unit Economics Calculator", phase="build_minimum"),
    ArtifactTypeInfo(id="runway_calculator", label="Runway Calculator", phase="build_minimum"),
    ArtifactTypeInfo(id="pricing_experiment", label="Pricing Experiment", phase="build_minimum"),
    ArtifactTypeInfo(id="pmf_dashboard", label="Product-Market Fit Dashboard", phase="sell_iterate"),
    ArtifactTypeInfo(id="pitch_deck", label="Pitch Deck Builder", phase="sell_iterate"),
    ArtifactTypeInfo(id="financial_model", label="Financial Model", phase="sell_iterate"),
    ArtifactTypeInfo(id="compliance_checklist", label="SA Compliance Checklist", phase="sell_iterate"),
    ArtifactTypeInfo(id="scaling_readiness", label="Scaling Readiness Assessment", phase="scale"),
    ArtifactTypeInfo(id="gtm_playbook", label="Go-To-Market Playbook", phase="scale"),
    ArtifactTypeInfo(id="okr_tracker", label="OKR Tracker", phase="scale"),
    ArtifactTypeInfo(id="hiring_planner", label="Hiring Planner", phase="scale"),
    ArtifactTypeInfo(id="retention_tracker", label="Retention Tracker", phase="scale"),
    ArtifactTypeInfo(id="market_expansion", label="Market Expansion", phase="scale"),
    ArtifactTypeInfo(id="process_docs", label="Process Documentation", phase="scale"),
    ArtifactTypeInfo(id="board_toolkit", label="Board Toolkit", phase="scale"),
    ArtifactTypeInfo(id="fundraising_pipeline", label="Fundraising Pipeline", phase="scale"),
    ArtifactTypeInfo(id="founder_ceo_tracker", label="Founder to CEO Tracker", phase="scale"),
    ArtifactTypeInfo(id="scale_financial_model", label="Scale Financial Model", phase="scale"),
    ArtifactTypeInfo(id="scale_unit_economics", label="Scale Unit Economics", phase="scale"),
    ArtifactTypeInfo(id="weekly_journal", label="Weekly Progress Journal", phase="cross_phase"),
    ArtifactTypeInfo(id="funding_tracker", label="Funding Application Tracker", phase="cross_phase"),
    ArtifactTypeInfo(id="advisor_network", label="Mentor & Advisor Network", phase="cross_phase"),
)


def catalog_entry(artifact_type: str) -> ArtifactTypeInfo | None:
    return next((info for info in ARTIFACT_CATALOG if info.id == artifact_type), None)
