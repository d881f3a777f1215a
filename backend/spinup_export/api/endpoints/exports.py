"""Artifact export endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from ...core.config import settings
from ...exporters.assembler import get_assembler
from ...exporters.base import ExportRequest, ExportResult, UnsupportedFormatError
from ...renderers.registry import RendererRegistry, get_renderer_registry
from ...schemas.artifact import ARTIFACT_CATALOG
from ...schemas.export import ArtifactTypeSummary, ExportPayload, ExportRecord
from ...services import ExportHistory, ExportService, filename_hint, get_export_history
from ...services.export_service import default_team_name

router = APIRouter()


def _get_history() -> ExportHistory:
    return get_export_history()


def _get_service() -> ExportService:
    return ExportService(history=get_export_history() if settings.persist_exports else None)


def _download(result: ExportResult) -> Response:
    headers = {"Content-Disposition": f'attachment; filename="{result.filename}"'}
    return Response(content=result.content, media_type=result.media_type, headers=headers)


@router.get(
    "/types",
    response_model=list[ArtifactTypeSummary],
    summary="List artifact types and whether they have a bespoke layout",
)
def list_artifact_types(renderers: RendererRegistry = Depends(get_renderer_registry)) -> list[ArtifactTypeSummary]:
    return [
        ArtifactTypeSummary(
            id=info.id,
            label=info.label,
            phase=info.phase,
            bespoke_renderer=renderers.has_bespoke(info.id),
        )
        for info in ARTIFACT_CATALOG
    ]


@router.post("/", summary="Render an artifact into a downloadable document")
async def export_artifact(payload: ExportPayload, service: ExportService = Depends(_get_service)) -> Response:
    request = ExportRequest(
        artifact_type=payload.artifact_type,
        data=payload.data,
        value_proposition=payload.value_proposition,
        team_name=default_team_name(payload.team_name),
        format=payload.format,
        filename_hint=filename_hint(payload.title, payload.artifact_type),
        artifact_id=payload.artifact_id,
        team_id=payload.team_id,
    )
    try:
        result = await service.export(request)
    except UnsupportedFormatError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate document.",
        ) from exc
    return _download(result)


@router.get("/history", response_model=list[ExportRecord], summary="List stored exports")
def list_exports(artifact_id: UUID | None = None, history: ExportHistory = Depends(_get_history)) -> list[ExportRecord]:
    return history.list(artifact_id)


@router.get("/history/{export_id}", summary="Download a stored export")
def download_export(export_id: UUID, history: ExportHistory = Depends(_get_history)) -> Response:
    try:
        record, content = history.read(export_id)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Export {export_id} not found")
    media_type = get_assembler().exporters.get(record.format).media_type
    return _download(ExportResult(filename=record.filename, media_type=media_type, content=content))
