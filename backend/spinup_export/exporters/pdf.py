"""PDF exporter using ReportLab."""

from __future__ import annotations

import io
from dataclasses import dataclass
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import HRFlowable, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

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


def _markup(text: str) -> str:
    return escape(xml_safe(text))


def _styles() -> dict[str, ParagraphStyle]:
    sheet = getSampleStyleSheet()
    return {
        "brand": ParagraphStyle("brand", parent=sheet["Normal"], fontName="Helvetica-Bold", fontSize=12, textColor=colors.HexColor("#888888"), alignment=TA_RIGHT),
        "h1": ParagraphStyle("h1", parent=sheet["Heading1"], spaceBefore=20, spaceAfter=10),
        "h2": ParagraphStyle("h2", parent=sheet["Heading2"], spaceBefore=15, spaceAfter=6),
        "subtitle": ParagraphStyle("subtitle", parent=sheet["Normal"], fontSize=10, textColor=colors.HexColor("#666666"), spaceAfter=15),
        "label": ParagraphStyle("label", parent=sheet["Normal"], fontName="Helvetica-Bold", fontSize=10, spaceBefore=10, spaceAfter=4),
        "body": ParagraphStyle("body", parent=sheet["Normal"], spaceAfter=8),
        "bullet": ParagraphStyle("bullet", parent=sheet["Normal"], leftIndent=10, spaceAfter=4),
        "cell": ParagraphStyle("cell", parent=sheet["Normal"], fontSize=9, leading=11),
        "cell_bold": ParagraphStyle("cell_bold", parent=sheet["Normal"], fontName="Helvetica-Bold", fontSize=9, leading=11),
    }


@dataclass
class PdfExporter(DocumentExporter):
    format: ExportFormat = ExportFormat.PDF
    media_type: str = "application/pdf"
    extension: str = "pdf"

    def export(self, document: Document) -> bytes:
        buffer = io.BytesIO()
        styles = _styles()
        pdf = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            title=document.title,
            author=document.brand,
            leftMargin=20 * mm,
            rightMargin=20 * mm,
            invariant=1,
        )
        story = [
            Paragraph(_markup(document.brand), styles["brand"]),
            Paragraph(_markup(document.title), styles["h1"]),
            Paragraph(_markup(document.subtitle), styles["subtitle"]),
        ]
        for block in document.blocks:
            story.extend(self._render_block(block, styles, pdf.width))
        pdf.build(story)
        return buffer.getvalue()

    def _render_block(self, block: DocumentBlock, styles: dict[str, ParagraphStyle], frame_width: float) -> list:
        if isinstance(block, HeadingBlock):
            return [Paragraph(_markup(block.text), styles["h1" if block.level == 1 else "h2"])]
        if isinstance(block, LabelBlock):
            return [Paragraph(_markup(block.text), styles["label"])]
        if isinstance(block, BodyBlock):
            text = _markup(block.text).replace("\n", "<br/>")
            return [Paragraph(f"<b>{text}</b>" if block.bold else text, styles["body"])]
        if isinstance(block, StatementBlock):
            return [Paragraph(f"<b>{_markup(block.lead)}</b>{_markup(block.text)}", styles["body"])]
        if isinstance(block, BulletBlock):
            return [Paragraph(f"• {_markup(block.text)}", styles["bullet"])]
        if isinstance(block, DividerBlock):
            return [HRFlowable(width="100%", thickness=0.75, color=colors.HexColor("#CCCCCC"), spaceBefore=10, spaceAfter=10)]
        if isinstance(block, TableBlock):
            return [self._render_table(block, styles, frame_width), Spacer(1, 6)]
        return []

    def _render_table(self, block: TableBlock, styles: dict[str, ParagraphStyle], frame_width: float) -> Table:
        def row(values: list[str], bold: bool = False) -> list[Paragraph]:
            style = styles["cell_bold" if bold else "cell"]
            return [Paragraph(_markup(value), style) for value in values]

        data = [row(block.header, bold=True), *(row(values) for values in block.rows)]
        if block.total is not None:
            data.append(row(block.total, bold=True))
        width = frame_width * block.width_pct / 100
        table = Table(data, colWidths=[width / len(block.header)] * len(block.header), hAlign="LEFT")
        table.setStyle(
            TableStyle(
                [
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#999999")),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ]
            )
        )
        return table
