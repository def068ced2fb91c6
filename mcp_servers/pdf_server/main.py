"""PDF MCP Server.

Exposes three tools that rewrite PDF files on disk:

| Tool               | Arguments                                   |
|--------------------|---------------------------------------------|
| remove-pdf-pages   | pdfPath, pageNumbers (1-indexed)            |
| add-text-watermark | watermarkText, pdfPath, position (=center)  |
| merge-pdfs         | pdfPaths, outputPath                        |

Every tool answers with a single text message; failures are reported in
that message rather than as protocol errors.

Transport is chosen by MCP_TRANSPORT (stdio by default, or http on
MCP_HOST:MCP_PORT).
"""

import sys

from fastmcp import FastMCP
from fastmcp.server.middleware.error_handling import ErrorHandlingMiddleware
from loguru import logger
from middleware.logging import LoggingMiddleware
from middleware.validation_error_sanitizer import ValidationErrorSanitizerMiddleware
from tools.add_text_watermark import add_text_watermark
from tools.merge_pdfs import merge_pdfs
from tools.remove_pdf_pages import remove_pdf_pages
from utils.logger import setup_logger
from utils.settings import Transport, get_settings

mcp = FastMCP(
    "pdf-server",
    instructions="Edit PDF files in place: remove pages by 1-indexed page number, stamp a rotated text watermark on every page, or merge several PDFs into a new file in the given order.",
)
mcp.add_middleware(ErrorHandlingMiddleware(include_traceback=True))
mcp.add_middleware(LoggingMiddleware())
mcp.add_middleware(ValidationErrorSanitizerMiddleware())

mcp.tool(
    remove_pdf_pages,
    name="remove-pdf-pages",
    description="Remove pages from a PDF",
)
mcp.tool(
    add_text_watermark,
    name="add-text-watermark",
    description="Add a text watermark to a PDF",
)
mcp.tool(
    merge_pdfs,
    name="merge-pdfs",
    description="Merge multiple PDF files into one",
)


def main() -> None:
    setup_logger()
    settings = get_settings()
    transport = settings.MCP_TRANSPORT

    logger.info(f"PDF MCP Server running on {transport.value}")
    if transport == Transport.HTTP:
        mcp.run(transport="http", host=settings.MCP_HOST, port=settings.MCP_PORT)
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:
        logger.exception(f"Fatal error in main(): {exc}")
        sys.exit(1)
