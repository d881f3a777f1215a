"""Fallback renderer for artifact types without a bespoke layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.config import settings
from ..schemas.document import DocumentBlock
from .base import ArtifactRenderer
from .blocks import body, label
from .formatting import humanize_key


@dataclass
class GenericRenderer(ArtifactRenderer):
    """Dumps every non-empty top-level string field as a label and paragraph.

    Numbers, lists and nested objects are skipped.
    """

    artifact_type: str = "generic"
    title: str = f"{settings.brand_name} Export"
    uses_value_proposition: bool = True

    def blocks(self, data: Mapping[str, Any]) -> list[DocumentBlock]:
        blocks: list[DocumentBlock] = []
        for key, value in data.items():
            if isinstance(value, str) and value:
                blocks += [label(humanize_key(str(key))), body(value)]
        return blocks
