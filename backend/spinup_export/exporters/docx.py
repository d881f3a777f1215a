"""DOCX exporter."""

from __future__ import annotations

import io
import zipfile
from dataclasses import dataclass
from datetime import datetime

from docx import Document as DocxDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor

from ..schemas.document import (
    BodyBlock,
    BulletBlock,
    DividerBlock,
    Document,
    DocumentBlock,
    HeadingBlock,
    LabelBlock,
    StatementBlock,
    TableBlock,
)
from .base import DocumentExporter, ExportFormat, xml_safe

# Package metadata and archive members carry fixed timestamps so that the
# same input always serializes to the same bytes.
_FIXED_TIMESTAMP = datetime(2024, 1, 1)
_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)

_BRAND_GRAY = RGBColor(0x88, 0x88, 0x88)
_MUTED_GRAY = RGBColor(0x66, 0x66, 0x66)
_DIVIDER_COLOR = "CCCCCC"

# (space before, space after) in points
_HEADING_SPACING = {1: (20, 10), 2: (15, 6)}


@dataclass
class DocxExporter(DocumentExporter):
    format: ExportFormat = ExportFormat.DOCX
    media_type: str = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    extension: str = "docx"

    def export(self, document: Document) -> bytes:
        doc = DocxDocument()
        self._stamp_properties(doc, document)
        self._render_shell(doc, document)
        for block in document.blocks:
            self._render_block(doc, block)
        buffer = io.BytesIO()
        doc.save(buffer)
        return _normalize_archive(buffer.getvalue())

    def _stamp_properties(self, doc: DocxDocument, document: Document) -> None:
        props = doc.core_properties
        props.title = xml_safe(document.title)
        props.author = xml_safe(document.brand)
        props.last_modified_by = xml_safe(document.brand)
        props.comments = f"Exported by {xml_safe(document.brand)}"
        props.revision = 1
        props.created = _FIXED_TIMESTAMP
        props.modified = _FIXED_TIMESTAMP
        props.last_printed = _FIXED_TIMESTAMP

    def _render_shell(self, doc: DocxDocument, document: Document) -> None:
        brand = doc.add_paragraph()
        brand.alignment = WD_ALIGN_PARAGRAPH.RIGHT
        run = brand.add_run(xml_safe(document.brand))
        run.bold = True
        run.font.size = Pt(12)
        run.font.color.rgb = _BRAND_GRAY

        self._render_heading(doc, HeadingBlock(text=document.title, level=1))

        subtitle = doc.add_paragraph()
        subtitle.paragraph_format.space_after = Pt(15)
        run = subtitle.add_run(xml_safe(document.subtitle))
        run.font.size = Pt(10)
        run.font.color.rgb = _MUTED_GRAY

    def _render_block(self, doc: DocxDocument, block: DocumentBlock) -> None:
        if isinstance(block, HeadingBlock):
            self._render_heading(doc, block)
        elif isinstance(block, LabelBlock):
            paragraph = doc.add_paragraph()
            paragraph.paragraph_format.space_before = Pt(10)
            paragraph.paragraph_format.space_after = Pt(4)
            run = paragraph.add_run(xml_safe(block.text))
            run.bold = True
            run.font.size = Pt(10)
        elif isinstance(block, BodyBlock):
            paragraph = doc.add_paragraph()
            paragraph.paragraph_format.space_after = Pt(8)
            run = paragraph.add_run(xml_safe(block.text))
            if block.bold:
                run.bold = True
        elif isinstance(block, StatementBlock):
            paragraph = doc.add_paragraph()
            paragraph.paragraph_format.space_after = Pt(10)
            paragraph.add_run(xml_safe(block.lead)).bold = True
            paragraph.add_run(xml_safe(block.text))
        elif isinstance(block, BulletBlock):
            paragraph = doc.add_paragraph(f"• {xml_safe(block.text)}")
            paragraph.paragraph_format.space_after = Pt(4)
        elif isinstance(block, DividerBlock):
            self._render_divider(doc)
        elif isinstance(block, TableBlock):
            self._render_table(doc, block)

    def _render_heading(self, doc: DocxDocument, block: HeadingBlock) -> None:
        heading = doc.add_heading(xml_safe(block.text), level=block.level)
        before, after = _HEADING_SPACING[block.level]
        heading.paragraph_format.space_before = Pt(before)
        heading.paragraph_format.space_after = Pt(after)

    def _render_divider(self, doc: DocxDocument) -> None:
        paragraph = doc.add_paragraph()
        borders = OxmlElement("w:pBdr")
        bottom = OxmlElement("w:bottom")
        bottom.set(qn("w:val"), "single")
        bottom.set(qn("w:sz"), "6")
        bottom.set(qn("w:space"), "1")
        bottom.set(qn("w:color"), _DIVIDER_COLOR)
        borders.append(bottom)
        # pBdr must precede w:spacing inside pPr, so it goes in first.
        paragraph._p.get_or_add_pPr().append(borders)
        paragraph.paragraph_format.space_before = Pt(10)
        paragraph.paragraph_format.space_after = Pt(10)

    def _render_table(self, doc: DocxDocument, block: TableBlock) -> None:
        table = doc.add_table(rows=0, cols=len(block.header))
        table.style = "Table Grid"
        _set_table_width(table, block.width_pct)
        header_size = Pt(9) if block.compact else None
        self._add_row(table, block.header, bold=True, size=header_size)
        for row in block.rows:
            self._add_row(table, row)
        if block.total is not None:
            self._add_row(table, block.total, bold=True)

    @staticmethod
    def _add_row(table, values: list[str], *, bold: bool = False, size: Pt | None = None) -> None:
        cells = table.add_row().cells
        for cell, value in zip(cells, values):
            run = cell.paragraphs[0].add_run(xml_safe(value))
            if bold:
                run.bold = True
            if size is not None:
                run.font.size = size


def _set_table_width(table, width_pct: int) -> None:
    tbl_pr = table._tbl.tblPr
    tbl_w = tbl_pr.find(qn("w:tblW"))
    if tbl_w is None:
        tbl_w = OxmlElement("w:tblW")
        tbl_pr.append(tbl_w)
    # pct widths are expressed in fiftieths of a percent
    tbl_w.set(qn("w:type"), "pct")
    tbl_w.set(qn("w:w"), str(width_pct * 50))


def _normalize_archive(raw: bytes) -> bytes:
    """Rewrite the OOXML zip with fixed member timestamps."""
    out = io.BytesIO()
    with zipfile.ZipFile(io.BytesIO(raw)) as source, zipfile.ZipFile(out, "w", zipfile.ZIP_DEFLATED) as target:
        for info in source.infolist():
            member = zipfile.ZipInfo(info.filename, date_time=_ZIP_EPOCH)
            member.compress_type = zipfile.ZIP_DEFLATED
            target.writestr(member, source.read(info.filename))
    return out.getvalue()
