from io import BytesIO
from pathlib import Path
from typing import Generator

import pytest
from docx import Document as DocxDocument
from fastapi.testclient import TestClient

from spinup_export.app import create_app
from spinup_export.core import config
from spinup_export.services import reset_export_history


@pytest.fixture()
def client(tmp_path: Path) -> Generator[TestClient, None, None]:
    config.settings.data_dir = tmp_path
    config.settings.persist_exports = False
    tmp_path.mkdir(parents=True, exist_ok=True)
    reset_export_history()
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
    config.settings.persist_exports = False
    reset_export_history()


def docx_lines(content: bytes) -> list[str]:
    """Paragraph texts followed by table cell texts, in document order per kind."""
    doc = DocxDocument(BytesIO(content))
    lines = [paragraph.text for paragraph in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            lines.extend(cell.text for cell in row.cells)
    return lines


def docx_tables(content: bytes) -> list[list[list[str]]]:
    doc = DocxDocument(BytesIO(content))
    return [[[cell.text for cell in row.cells] for row in table.rows] for table in doc.tables]
