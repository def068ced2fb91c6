"""Middleware that shortens argument validation errors.

Arguments such as an unknown watermark ``position`` or a non-integer page
number fail Pydantic validation before the tool body runs. The raw
``ValidationError`` text is long and links to ``https://errors.pydantic.dev/``;
this middleware re-raises it as a one-line message, with a usage hint for the
argument that was wrong, which the MCP SDK reports with ``isError=True``.
"""

from typing import override

from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from fastmcp.tools.tool import ToolResult
from loguru import logger
from mcp.types import CallToolRequestParams
from models.watermark import WATERMARK_POSITIONS
from pydantic import ValidationError as PydanticValidationError

ARGUMENT_HINTS: dict[str, str] = {
    "pdfPath": "path to an existing PDF file",
    "pageNumbers": "list of 1-indexed integers",
    "watermarkText": "text to draw on every page",
    "position": f"one of {', '.join(WATERMARK_POSITIONS)}",
    "pdfPaths": "list of PDF file paths, merged in order",
    "outputPath": "path for the merged PDF, distinct from every input",
}


def format_validation_error(exc: PydanticValidationError) -> str:
    """Format a Pydantic ValidationError into a concise, URL-free string."""
    parts: list[str] = []
    for err in exc.errors():
        loc = [str(segment) for segment in err["loc"]]
        # Top-level argument name, skipping list indices and call wrappers
        argument = next((seg for seg in loc if seg in ARGUMENT_HINTS), None)
        text = f"{'.'.join(loc)}: {err['msg']}" if loc else err["msg"]
        if argument:
            text += f" (expected {ARGUMENT_HINTS[argument]})"
        parts.append(text)
    return "Validation error: " + "; ".join(parts)


class ValidationErrorSanitizerMiddleware(Middleware):
    """Catches Pydantic ``ValidationError`` and re-raises a concise ``Exception``."""

    @override
    async def on_call_tool(
        self,
        context: MiddlewareContext[CallToolRequestParams],
        call_next: CallNext[CallToolRequestParams, ToolResult],
    ) -> ToolResult:
        try:
            return await call_next(context)
        except PydanticValidationError as exc:
            clean = format_validation_error(exc)
            logger.debug(f"Invalid arguments for {context.message.name}: {clean}")
            raise Exception(clean) from None  # noqa: TRY002
