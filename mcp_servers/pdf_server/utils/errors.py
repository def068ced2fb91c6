"""Error kinds surfaced by the PDF tools.

Only two kinds reach the caller: a validation error for out-of-range page
numbers, and a processing error for anything raised while loading,
transforming or saving. Both are returned as plain text, never raised
through the transport.
"""


class InvalidPageNumbersError(ValueError):
    """Raised when requested page numbers fall outside the document."""

    def __init__(self, invalid_pages: list[int], page_count: int):
        self.invalid_pages = invalid_pages
        self.page_count = page_count
        pages = ", ".join(str(p) for p in invalid_pages)
        super().__init__(
            f"Invalid page numbers: {pages}. The document has {page_count} pages."
        )


class FileTooLargeError(ValueError):
    """Raised when a PDF exceeds the configured size limit."""

    def __init__(self, path: str, size_mb: float, max_mb: float):
        super().__init__(
            f"File too large: {size_mb:.1f}MB exceeds {max_mb:.0f}MB limit ({path})"
        )


def validation_error(exc: InvalidPageNumbersError) -> str:
    """Format a page validation error."""
    return f"Error: {exc}"


def processing_error(exc: BaseException) -> str:
    """Format a failure while loading, transforming or saving a PDF."""
    return f"Error processing PDF: {_message(exc)}"


def merge_error(exc: BaseException) -> str:
    """Format a failure while merging PDFs."""
    return f"Error merging PDFs: {_message(exc)}"


def _message(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__
