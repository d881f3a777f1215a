"""Base exporter definitions."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from uuid import UUID

from ..schemas.artifact import ValueProposition
from ..schemas.document import Document

# Characters XML 1.0 cannot carry. Vertical tab and form feed are Word line and
# page breaks, so they survive as newlines.
_XML_BREAKS = re.compile(r"[\x0b\x0c]")
_XML_INVALID = re.compile(r"[\x00-\x08\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


class UnsupportedFormatError(ValueError):
    """Raised when no exporter is registered for the requested format."""


def xml_safe(text: str) -> str:
    return _XML_INVALID.sub("", _XML_BREAKS.sub("\n", text))


class ExportFormat(str, Enum):
    DOCX = "docx"
    PDF = "pdf"
    MARKDOWN = "markdown"
    TXT = "txt"


@dataclass(slots=True)
class ExportRequest:
    artifact_type: str
    data: dict[str, Any] = field(default_factory=dict)
    value_proposition: ValueProposition | None = None
    team_name: str = "SpinUp"
    format: ExportFormat = ExportFormat.DOCX
    filename_hint: str = "document"
    artifact_id: UUID | None = None
    team_id: UUID | None = None


@dataclass(slots=True)
class ExportResult:
    filename: str
    media_type: str
    content: bytes


class DocumentExporter(ABC):
    format: ExportFormat
    media_type: str
    extension: str

    @abstractmethod
    def export(self, document: Document) -> bytes:
        ...
