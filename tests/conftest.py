"""Pytest configuration and fixtures for the PDF server tests.

Fixture PDFs are generated on the fly with PyMuPDF. Every page carries a
unique label (``<name>-p<n>``) so page order can be checked after a tool
has rewritten the file.

Run with: uv run pytest tests/ -v
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path

import fitz  # PyMuPDF
import pytest
from utils.settings import get_settings

LETTER_WIDTH = 612
LETTER_HEIGHT = 792


def write_labeled_pdf(path: Path, label: str, pages: int) -> Path:
    """Write a letter-size PDF whose n-th page reads ``{label}-p{n}``."""
    doc = fitz.open()
    try:
        for i in range(1, pages + 1):
            page = doc.new_page(width=LETTER_WIDTH, height=LETTER_HEIGHT)
            # Courier keeps fixture text apart from the Helvetica watermark
            page.insert_text((72, 72), f"{label}-p{i}", fontname="cour", fontsize=12)
        doc.save(str(path))
    finally:
        doc.close()
    return path


def page_texts(path: Path) -> list[str]:
    """Return the extracted text of every page, in order."""
    with fitz.open(str(path)) as doc:
        return [page.get_text() for page in doc]


def page_labels(path: Path) -> list[str]:
    """Return the fixture label found on each page, in order."""
    labels = []
    for text in page_texts(path):
        label = next(
            (token for token in text.split() if "-p" in token), text.strip()
        )
        labels.append(label)
    return labels


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test without a sandbox root and with fresh settings."""
    monkeypatch.delenv("APP_PDF_ROOT", raising=False)
    monkeypatch.delenv("APP_FS_ROOT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_pdf(tmp_path: Path) -> Callable[[str, int], Path]:
    """Factory: ``make_pdf("A", 3)`` writes ``tmp_path/A.pdf`` with 3 labeled pages."""

    def _make(label: str, pages: int) -> Path:
        return write_labeled_pdf(tmp_path / f"{label}.pdf", label, pages)

    return _make
