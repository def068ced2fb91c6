import io
import os
from typing import Annotated

import pypdf
from loguru import logger
from pydantic import Field
from utils.decorators import make_async_background
from utils.errors import merge_error
from utils.path_utils import resolve_pdf_path
from utils.pdf_io import read_pdf_bytes, write_pdf_bytes


def _merge(pdf_paths: list[str], output_path: str) -> int:
    if not pdf_paths:
        raise ValueError("No PDF paths provided")

    # Symlinked aliases of an input count as that input
    target = os.path.realpath(resolve_pdf_path(output_path))
    for pdf_path in pdf_paths:
        if os.path.realpath(resolve_pdf_path(pdf_path)) == target:
            raise ValueError(f"Output path must differ from input path: {pdf_path}")

    writer = pypdf.PdfWriter()

    # Input order is page order; each source keeps its own page order
    for pdf_path in pdf_paths:
        reader = pypdf.PdfReader(io.BytesIO(read_pdf_bytes(pdf_path)))
        writer.append(reader)

    buffer = io.BytesIO()
    writer.write(buffer)

    write_pdf_bytes(output_path, buffer.getvalue())
    return len(writer.pages)


@make_async_background
def merge_pdfs(
    pdfPaths: Annotated[
        list[str], Field(description="Array of PDF file paths to merge")
    ],
    outputPath: Annotated[
        str, Field(description="Output path for the merged PDF")
    ],
) -> str:
    """Merge multiple PDF files into one.

    Pages appear in input order, each file's pages kept in their original
    order. Inputs are never modified; nothing is written if any input fails.
    """
    try:
        page_count = _merge(pdfPaths, outputPath)
    except Exception as exc:
        logger.warning(f"Failed to merge into {outputPath}: {repr(exc)}")
        return merge_error(exc)

    logger.debug(f"Merged {len(pdfPaths)} PDF(s), {page_count} page(s), into {outputPath}")
    return f"Successfully merged {len(pdfPaths)} PDFs into {outputPath}."
