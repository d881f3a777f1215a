"""Optional on-disk history of generated exports."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from threading import RLock
from uuid import UUID, uuid4

from pydantic import TypeAdapter

from ..core.config import settings
from ..exporters.base import ExportRequest, ExportResult
from ..schemas.export import ExportRecord

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[ExportRecord])


class ExportHistory:
    """Writes export files under ``<root>/<team_id>/`` and keeps a JSON manifest."""

    def __init__(self, root: Path, limit: int = 200) -> None:
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)
        self.manifest = self.root / "exports.json"
        self.limit = max(limit, 1)
        self._lock = RLock()
        self._records: list[ExportRecord] = self._load()

    def _load(self) -> list[ExportRecord]:
        if not self.manifest.exists():
            return []
        try:
            return _RECORDS.validate_json(self.manifest.read_bytes())
        except ValueError:
            logger.warning("Ignoring unreadable export manifest", extra={"path": str(self.manifest)})
            return []

    def _flush(self) -> None:
        payload = [record.model_dump(mode="json") for record in self._records]
        self.manifest.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def record(self, request: ExportRequest, result: ExportResult) -> ExportRecord:
        record_id = uuid4()
        now = datetime.now(timezone.utc)
        team_dir = self.root / (str(request.team_id) if request.team_id else "unassigned")
        team_dir.mkdir(parents=True, exist_ok=True)
        stem = str(request.artifact_id) if request.artifact_id else request.filename_hint
        extension = Path(result.filename).suffix
        path = team_dir / f"{stem}-{int(now.timestamp() * 1000)}-{record_id}{extension}"
        path.write_bytes(result.content)
        record = ExportRecord(
            id=record_id,
            artifact_id=request.artifact_id,
            team_id=request.team_id,
            artifact_type=request.artifact_type,
            format=request.format,
            filename=result.filename,
            storage_path=str(path.relative_to(self.root)),
            size_bytes=len(result.content),
            created_at=now,
        )
        with self._lock:
            self._records.insert(0, record)
            for stale in self._records[self.limit :]:
                (self.root / stale.storage_path).unlink(missing_ok=True)
            del self._records[self.limit :]
            self._flush()
        return record

    def list(self, artifact_id: UUID | None = None) -> list[ExportRecord]:
        with self._lock:
            return [r for r in self._records if artifact_id is None or r.artifact_id == artifact_id]

    def get(self, export_id: UUID) -> ExportRecord:
        with self._lock:
            record = next((r for r in self._records if r.id == export_id), None)
        if record is None:
            raise KeyError(f"Export {export_id} not found")
        return record

    def read(self, export_id: UUID) -> tuple[ExportRecord, bytes]:
        record = self.get(export_id)
        path = self.root / record.storage_path
        if not path.exists():
            raise KeyError(f"Export file for {export_id} is missing")
        return record, path.read_bytes()


_EXPORT_HISTORY_SINGLETON: ExportHistory | None = None


def get_export_history() -> ExportHistory:
    global _EXPORT_HISTORY_SINGLETON
    if _EXPORT_HISTORY_SINGLETON is None:
        _EXPORT_HISTORY_SINGLETON = ExportHistory(settings.exports_dir, settings.export_history_limit)
    return _EXPORT_HISTORY_SINGLETON


def reset_export_history() -> None:
    global _EXPORT_HISTORY_SINGLETON
    _EXPORT_HISTORY_SINGLETON = None
