"""Exporter registry."""

from __future__ import annotations

from ..schemas.document import Document
from .base import DocumentExporter, ExportFormat, UnsupportedFormatError
from .docx import DocxExporter
from .markdown import MarkdownExporter, TextExporter
from .pdf import PdfExporter


class ExporterRegistry:
    """Resolves exporters by format."""

    def __init__(self) -> None:
        self._registry: dict[ExportFormat, DocumentExporter] = {
            ExportFormat.DOCX: DocxExporter(),
            ExportFormat.MARKDOWN: MarkdownExporter(),
            ExportFormat.PDF: PdfExporter(),
            ExportFormat.TXT: TextExporter(),
        }

    def get(self, export_format: ExportFormat | str) -> DocumentExporter:
        try:
            exporter = self._registry.get(ExportFormat(export_format))
        except ValueError:
            exporter = None
        if not exporter:
            raise UnsupportedFormatError(f"Unsupported export format: {export_format}")
        return exporter

    def export(self, document: Document, export_format: ExportFormat | str) -> bytes:
        return self.get(export_format).export(document)
