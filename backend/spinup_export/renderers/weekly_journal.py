"""Weekly progress journal renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..schemas.document import DocumentBlock
from ..schemas.payloads import WeeklyJournalPayload
from .base import ArtifactRenderer
from .blocks import divider, field, heading2


@dataclass
class WeeklyJournalRenderer(ArtifactRenderer):
    """Expects the journal entries to be passed in under ``data["entries"]``."""

    artifact_type: str = "weekly_journal"
    title: str = "Weekly Progress Journal"

    def blocks(self, data: Mapping[str, Any]) -> list[DocumentBlock]:
        blocks: list[DocumentBlock] = []
        for entry in WeeklyJournalPayload.coerce(data).entries:
            blocks += [
                heading2(f"Week of {entry.week_start if entry.week_start is not None else '?'}"),
                *field("What we did", entry.what_we_did),
                *field("What we learned", entry.what_we_learned),
                *field("What changed", entry.what_changed),
                *field("Blockers", entry.blockers),
                *field("Next week's priority", entry.next_week_priority),
                divider(),
            ]
        return blocks
