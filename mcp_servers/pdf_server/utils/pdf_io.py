"""Read, transform and persist PDFs.

Every tool follows the same pipeline: locate the file, load it with the
document library, apply one transformation, serialize, and write the bytes
back. Nothing touches the disk until the transformation has succeeded.

Files are stored as raw PDF bytes.
"""

import io
import os
import tempfile
from collections.abc import Callable
from typing import TypeVar

import fitz  # PyMuPDF
import pypdf
from loguru import logger

from utils.errors import FileTooLargeError
from utils.path_utils import resolve_pdf_path
from utils.settings import get_settings

T = TypeVar("T")


def read_pdf_bytes(path: str) -> bytes:
    """Read the bytes of the PDF at ``path``.

    Raises:
        FileNotFoundError: If the path does not exist or is not a file
        FileTooLargeError: If the file exceeds MAX_FILE_SIZE_MB
        PathTraversalError: If the path escapes the sandbox root
    """
    target_path = resolve_pdf_path(path)

    if not os.path.exists(target_path):
        raise FileNotFoundError(f"File not found: {path}")
    if not os.path.isfile(target_path):
        raise FileNotFoundError(f"Not a file: {path}")

    max_mb = get_settings().MAX_FILE_SIZE_MB
    file_size = os.path.getsize(target_path)
    if file_size > max_mb * 1024 * 1024:
        raise FileTooLargeError(path, file_size / (1024 * 1024), max_mb)

    with open(target_path, "rb") as f:
        return f.read()


def write_pdf_bytes(path: str, data: bytes) -> None:
    """Write ``data`` to ``path``, replacing any existing file atomically."""
    target_path = resolve_pdf_path(path)
    directory = os.path.dirname(target_path) or "."

    # Sibling temp file, then an atomic replace of the target
    fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".pdf.tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_path, target_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise

    logger.debug(f"Wrote {len(data)} bytes to {target_path}")


def load_document(data: bytes) -> fitz.Document:
    """Open PDF bytes as a PyMuPDF document."""
    return fitz.open(stream=data, filetype="pdf")


def serialize_document(doc: fitz.Document) -> bytes:
    """Serialize a document, including one left with no pages.

    PyMuPDF refuses to save a zero-page document, so that case is written
    as an empty page tree with pypdf.
    """
    if doc.page_count == 0:
        buffer = io.BytesIO()
        pypdf.PdfWriter().write(buffer)
        return buffer.getvalue()
    return doc.tobytes(garbage=3, deflate=True)


def transform_pdf_file(
    path: str,
    transform: Callable[[fitz.Document], T],
    output_path: str | None = None,
) -> T:
    """Load ``path``, apply ``transform`` in memory, and persist the result.

    Args:
        path: Source PDF
        transform: Mutates the document in place; its return value is passed through
        output_path: Destination; defaults to overwriting ``path``

    Returns:
        Whatever ``transform`` returned
    """
    doc = load_document(read_pdf_bytes(path))
    try:
        result = transform(doc)
        data = serialize_document(doc)
    finally:
        doc.close()

    write_pdf_bytes(output_path or path, data)
    return result
