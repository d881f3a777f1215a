"""Document exporters for various formats."""

from .assembler import DocumentAssembler, get_assembler
from .base import ExportFormat, ExportRequest, ExportResult, UnsupportedFormatError, xml_safe
from .registry import ExporterRegistry

__all__ = [
    "DocumentAssembler",
    "ExportFormat",
    "ExportRequest",
    "ExportResult",
    "ExporterRegistry",
    "UnsupportedFormatError",
    "get_assembler",
    "xml_safe",
]
