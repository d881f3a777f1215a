"""Company name due-diligence renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..schemas.document import DocumentBlock
from ..schemas.payloads import CompanyNamePayload, SearchOutcome
from .base import ArtifactRenderer
from .blocks import body, field, heading2, joined


def _yes_no(flag: bool | None) -> str:
    return "Yes" if flag else "No"


def _search_section(title: str, search: SearchOutcome) -> list[DocumentBlock]:
    return [heading2(title), *field("Outcome", search.outcome), *field("Notes", search.notes)]


@dataclass
class CompanyNameRenderer(ArtifactRenderer):
    artifact_type: str = "company_name"
    title: str = "Company Name Due Diligence"

    def blocks(self, data: Mapping[str, Any]) -> list[DocumentBlock]:
        payload = CompanyNamePayload.coerce(data)
        bar = payload.bar_test
        return joined(
            [
                [
                    heading2("Bar Test"),
                    *field("Easy to pronounce", _yes_no(bar.easy_pronounce)),
                    *field("Easy to spell", _yes_no(bar.easy_spell)),
                    *field("Not easily confused", _yes_no(bar.not_confused)),
                    *field("Memorable in one hearing", _yes_no(bar.memorable)),
                ],
                _search_section("Name Search (Govchain)", payload.name_search),
                _search_section("Trademark Search (Govchain)", payload.trademark_search),
                _search_section("Domain Check", payload.domain_check),
                [heading2("Final Name Decision"), body(payload.final_name)],
            ]
        )
