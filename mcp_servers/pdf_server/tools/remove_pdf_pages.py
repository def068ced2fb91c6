from typing import Annotated

import fitz  # PyMuPDF
from loguru import logger
from pydantic import Field
from utils.decorators import make_async_background
from utils.errors import InvalidPageNumbersError, processing_error, validation_error
from utils.pdf_io import transform_pdf_file


def find_invalid_pages(page_numbers: list[int], page_count: int) -> list[int]:
    """Return out-of-range page numbers, once each, in first-seen order."""
    invalid: list[int] = []
    for num in page_numbers:
        if (num < 1 or num > page_count) and num not in invalid:
            invalid.append(num)
    return invalid


def _remove_pages(doc: fitz.Document, page_numbers: list[int]) -> int:
    invalid = find_invalid_pages(page_numbers, doc.page_count)
    if invalid:
        raise InvalidPageNumbersError(invalid, doc.page_count)

    # Highest first, so earlier deletions never shift pages still to be removed
    for page_num in sorted(set(page_numbers), reverse=True):
        doc.delete_page(page_num - 1)

    return len(set(page_numbers))


@make_async_background
def remove_pdf_pages(
    pdfPath: Annotated[str, Field(description="The path to the PDF file")],
    pageNumbers: Annotated[
        list[int],
        Field(description="The page numbers to remove from the PDF (1-indexed)"),
    ],
) -> str:
    """Remove pages from a PDF.

    All page numbers are checked against the document first; if any is out
    of range nothing is removed. The file is overwritten in place.
    """
    try:
        removed = transform_pdf_file(
            pdfPath, lambda doc: _remove_pages(doc, pageNumbers)
        )
    except InvalidPageNumbersError as exc:
        logger.debug(f"Rejected page numbers for {pdfPath}: {exc.invalid_pages}")
        return validation_error(exc)
    except Exception as exc:
        logger.warning(f"Failed to remove pages from {pdfPath}: {repr(exc)}")
        return processing_error(exc)

    logger.debug(f"Removed {removed} page(s) from {pdfPath}")
    return f"Successfully removed {removed} pages from the PDF."
