"""Middleware that logs every tool call with its outcome and duration."""

import time
from typing import override

from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from fastmcp.tools.tool import ToolResult
from loguru import logger
from mcp.types import CallToolRequestParams


class LoggingMiddleware(Middleware):
    """Logs ``tool <name> ok/failed in <ms>ms`` for each tool call."""

    @override
    async def on_call_tool(
        self,
        context: MiddlewareContext[CallToolRequestParams],
        call_next: CallNext[CallToolRequestParams, ToolResult],
    ) -> ToolResult:
        name = context.message.name
        start = time.perf_counter()
        try:
            result = await call_next(context)
        except Exception as exc:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.error(f"tool {name} failed in {elapsed_ms:.0f}ms: {exc}")
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"tool {name} ok in {elapsed_ms:.0f}ms")
        return result
