"""Export orchestration: resolve renderer, render, assemble, serialize."""

from __future__ import annotations

import asyncio
import logging
import re

from ..core.config import settings
from ..exporters.assembler import DocumentAssembler, get_assembler
from ..exporters.base import ExportRequest, ExportResult
from ..renderers.registry import RendererRegistry, get_renderer_registry
from ..schemas.artifact import catalog_entry
from .export_history import ExportHistory

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def filename_hint(title: str | None, artifact_type: str) -> str:
    """Derive a download filename stem from the artifact title (or type)."""
    if not title:
        entry = catalog_entry(artifact_type)
        title = entry.label if entry else artifact_type
    return _NON_ALNUM.sub("-", title).lower() or "document"


class ExportService:
    """Stateless per-request export pipeline."""

    def __init__(
        self,
        renderers: RendererRegistry | None = None,
        assembler: DocumentAssembler | None = None,
        history: ExportHistory | None = None,
    ) -> None:
        self.renderers = renderers or get_renderer_registry()
        self.assembler = assembler or get_assembler()
        self.history = history

    def render(self, request: ExportRequest) -> ExportResult:
        renderer = self.renderers.resolve(request.artifact_type)
        logger.debug(
            "Resolved renderer",
            extra={"artifact_type": request.artifact_type, "renderer": type(renderer).__name__},
        )
        exporter = self.assembler.exporters.get(request.format)
        content = renderer.render(
            request.data,
            request.value_proposition,
            request.team_name,
            export_format=request.format,
            assembler=self.assembler,
        )
        return ExportResult(
            filename=f"{request.filename_hint}.{exporter.extension}",
            media_type=exporter.media_type,
            content=content,
        )

    async def export(self, request: ExportRequest) -> ExportResult:
        """Render and record off the event loop.

        An unsupported format raises :class:`UnsupportedFormatError` before any
        work starts; every later failure is logged and re-raised.
        """
        self.assembler.exporters.get(request.format)
        try:
            result = await asyncio.to_thread(self.render, request)
        except Exception:
            logger.exception(
                "Document serialization failed",
                extra={"artifact_type": request.artifact_type, "format": request.format.value},
            )
            raise
        logger.info(
            "Export rendered",
            extra={
                "artifact_type": request.artifact_type,
                "format": request.format.value,
                "size_bytes": len(result.content),
            },
        )
        if self.history is not None:
            await asyncio.to_thread(self.history.record, request, result)
        return result


def default_team_name(team_name: str | None) -> str:
    return team_name or settings.default_team_name
