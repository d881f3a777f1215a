"""MVP definition renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..schemas.document import DocumentBlock
from ..schemas.payloads import MvpDefinitionPayload
from .base import ArtifactRenderer
from .blocks import bullet, field, joined, label


@dataclass
class MvpDefinitionRenderer(ArtifactRenderer):
    artifact_type: str = "mvp_definition"
    title: str = "MVP Definition"
    uses_value_proposition: bool = True

    def blocks(self, data: Mapping[str, Any]) -> list[DocumentBlock]:
        mvp = MvpDefinitionPayload.coerce(data)
        features = [bullet(f"[{feature.type or 'core'}] {feature.name or ''}") for feature in mvp.features]
        return joined(
            [
                field("Core value proposition", mvp.core_value_prop),
                [label("Minimum feature set"), *features],
                field("What we are NOT building", mvp.not_building),
                field("Success metric", mvp.success_metric),
                field("First user / customer", mvp.first_user),
            ]
        )
