"""Wraps renderer output in the branded document shell and serializes it."""

from __future__ import annotations

from typing import Sequence

from ..core.config import settings
from ..schemas.document import Document, DocumentBlock
from .base import ExportFormat
from .registry import ExporterRegistry


class DocumentAssembler:
    """Builds the brand mark / title / team subtitle shell around a block list.

    Blocks are passed through verbatim and in order; nothing is validated here.
    """

    def __init__(self, exporters: ExporterRegistry | None = None, brand: str | None = None) -> None:
        self.exporters = exporters or ExporterRegistry()
        self.brand = brand or settings.brand_name

    def assemble(self, team_name: str, title: str, blocks: Sequence[DocumentBlock]) -> Document:
        return Document(brand=self.brand, title=title, subtitle=team_name, blocks=list(blocks))

    def build(
        self,
        team_name: str,
        title: str,
        blocks: Sequence[DocumentBlock],
        export_format: ExportFormat | str = ExportFormat.DOCX,
    ) -> bytes:
        return self.exporters.export(self.assemble(team_name, title, blocks), export_format)


_ASSEMBLER_SINGLETON: DocumentAssembler | None = None


def get_assembler() -> DocumentAssembler:
    global _ASSEMBLER_SINGLETON
    if _ASSEMBLER_SINGLETON is None:
        _ASSEMBLER_SINGLETON = DocumentAssembler()
    return _ASSEMBLER_SINGLETON
