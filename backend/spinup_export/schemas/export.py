"""API payloads for the export endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from ..exporters.base import ExportFormat
from .artifact import Phase, ValueProposition


class ExportPayload(BaseModel):
    """Everything the export engine needs, as gathered by the calling application."""

    artifact_type: str
    title: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)
    value_proposition: ValueProposition | None = None
    team_name: str | None = None
    format: ExportFormat = ExportFormat.DOCX
    artifact_id: UUID | None = None
    team_id: UUID | None = None


class ExportRecord(BaseModel):
    """Stored export, mirroring one row of the ``artifact_exports`` table."""

    id: UUID
    artifact_id: UUID | None = None
    team_id: UUID | None = None
    artifact_type: str
    format: ExportFormat
    filename: str
    storage_path: str
    size_bytes: int
    created_at: datetime


class ArtifactTypeSummary(BaseModel):
    id: str
    label: str
    phase: Phase
    bespoke_renderer: bool
