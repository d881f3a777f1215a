"""Base renderer definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from ..exporters.assembler import DocumentAssembler, get_assembler
from ..exporters.base import ExportFormat
from ..schemas.artifact import ValueProposition
from ..schemas.document import DocumentBlock
from .blocks import value_proposition_blocks


class ArtifactRenderer(ABC):
    """Projects one artifact type's ``data`` payload into document blocks."""

    artifact_type: str
    title: str
    uses_value_proposition: bool = False

    def render(
        self,
        data: Mapping[str, Any],
        value_proposition: ValueProposition | None,
        team_name: str,
        *,
        export_format: ExportFormat | str = ExportFormat.DOCX,
        assembler: DocumentAssembler | None = None,
    ) -> bytes:
        blocks = self.render_blocks(data, value_proposition)
        return (assembler or get_assembler()).build(team_name, self.title, blocks, export_format)

    def render_blocks(self, data: Mapping[str, Any], value_proposition: ValueProposition | None) -> list[DocumentBlock]:
        lead = value_proposition_blocks(value_proposition) if self.uses_value_proposition else []
        return [*lead, *self.blocks(data if isinstance(data, Mapping) else {})]

    @abstractmethod
    def blocks(self, data: Mapping[str, Any]) -> list[DocumentBlock]:
        ...
