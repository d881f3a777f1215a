"""Service layer modules."""

from .export_history import ExportHistory, get_export_history, reset_export_history
from .export_service import ExportService, filename_hint

__all__ = ["ExportHistory", "ExportService", "filename_hint", "get_export_history", "reset_export_history"]
