"""SA compliance checklist renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..schemas.document import DocumentBlock
from ..schemas.payloads import ComplianceChecklistPayload
from .base import ArtifactRenderer
from .blocks import body, divider, label

COMPLIANCE_ITEMS: tuple[tuple[str, str], ...] = (
    ("cipc_registration", "CIPC Registration"),
    ("sars_income_tax", "SARS Income Tax"),
    ("business_bank_account", "Business Bank Account"),
    ("shareholder_agreement", "Shareholder Agreement"),
    ("ip_assignment", "IP Assignment Agreement"),
    ("tto_clearance", "TTO Clearance"),
    ("sars_paye", "SARS PAYE"),
    ("vat_registration", "VAT Registration"),
    ("bbbee_affidavit", "B-BBEE Affidavit"),
)

DEFAULT_STATUS = "not_started"


@dataclass
class ComplianceChecklistRenderer(ArtifactRenderer):
    artifact_type: str = "compliance_checklist"
    title: str = "SA Compliance Checklist"

    def blocks(self, data: Mapping[str, Any]) -> list[DocumentBlock]:
        items = ComplianceChecklistPayload.coerce(data).items
        blocks: list[DocumentBlock] = []
        for key, caption in COMPLIANCE_ITEMS:
            item = items.get(key)
            status = item.status if item and item.status is not None else DEFAULT_STATUS
            blocks += [label(caption), body(f"Status: {status}")]
            if item and item.notes:
                blocks.append(body(f"Notes: {item.notes}"))
            blocks.append(divider())
        return blocks
