"""Markdown and plain-text exporters."""

from __future__ import annotations

from dataclasses import dataclass

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
from .base import DocumentExporter, ExportFormat


def _cell(value: str) -> str:
    return value.replace("|", "\\|").replace("\n", " ")


@dataclass
class MarkdownExporter(DocumentExporter):
    format: ExportFormat = ExportFormat.MARKDOWN
    media_type: str = "text/markdown; charset=utf-8"
    extension: str = "md"

    def export(self, document: Document) -> bytes:
        lines: list[str] = [f"_{document.brand}_", "", f"# {document.title}", "", f"_{document.subtitle}_", ""]
        for block in document.blocks:
            self._render_block(lines, block)
        return "\n".join(lines).rstrip("\n").encode("utf-8") + b"\n"

    def _render_block(self, lines: list[str], block: DocumentBlock) -> None:
        if isinstance(block, HeadingBlock):
            lines.append(f"{'#' * block.level} {block.text}")
        elif isinstance(block, LabelBlock):
            lines.append(f"**{block.text}**")
        elif isinstance(block, BodyBlock):
            lines.append(f"**{block.text}**" if block.bold else block.text)
        elif isinstance(block, StatementBlock):
            lines.append(f"**{block.lead.strip()}** {block.text}")
        elif isinstance(block, BulletBlock):
            lines.append(f"- {block.text}")
        elif isinstance(block, DividerBlock):
            lines.append("---")
        elif isinstance(block, TableBlock):
            lines.append("| " + " | ".join(_cell(value) for value in block.header) + " |")
            lines.append("|" + "---|" * len(block.header))
            for row in block.rows:
                lines.append("| " + " | ".join(_cell(value) for value in row) + " |")
            if block.total is not None:
                lines.append("| " + " | ".join(f"**{_cell(value)}**" if value else "" for value in block.total) + " |")
        lines.append("")


@dataclass
class TextExporter(DocumentExporter):
    format: ExportFormat = ExportFormat.TXT
    media_type: str = "text/plain; charset=utf-8"
    extension: str = "txt"

    def export(self, document: Document) -> bytes:
        lines: list[str] = [document.brand, "", document.title.upper(), document.subtitle, ""]
        for block in document.blocks:
            self._render_block(lines, block)
        return "\n".join(lines).rstrip("\n").encode("utf-8") + b"\n"

    def _render_block(self, lines: list[str], block: DocumentBlock) -> None:
        if isinstance(block, HeadingBlock):
            lines.extend(["", block.text, "=" * len(block.text) if block.level == 1 else "-" * len(block.text)])
        elif isinstance(block, LabelBlock):
            lines.append(f"{block.text}:")
        elif isinstance(block, BodyBlock):
            lines.extend([block.text, ""])
        elif isinstance(block, StatementBlock):
            lines.extend([f"{block.lead}{block.text}", ""])
        elif isinstance(block, BulletBlock):
            lines.append(f"  * {block.text}")
        elif isinstance(block, DividerBlock):
            lines.extend(["-" * 40, ""])
        elif isinstance(block, TableBlock):
            grid = [block.header, *block.rows]
            if block.total is not None:
                grid.append(block.total)
            widths = [max(len(row[i]) if i < len(row) else 0 for row in grid) for i in range(len(block.header))]
            for row in grid:
                lines.append("  ".join(value.ljust(width) for value, width in zip(row, widths)).rstrip())
            lines.append("")
