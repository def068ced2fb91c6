"""
Utility decorators for the PDF tools.
"""

import asyncio
import functools
from collections.abc import Awaitable, Callable
from concurrent.futures import ThreadPoolExecutor
from typing import ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")

# One worker: tool bodies run strictly one at a time
_EXECUTOR = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pdf-tool")


def make_async_background(func: Callable[P, R]) -> Callable[P, Awaitable[R]]:
    """Run a blocking tool body on the shared background worker.

    The event loop keeps serving the transport while the file I/O and PDF
    work happen on the worker thread. Calls are queued, never overlapped.
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            _EXECUTOR, functools.partial(func, *args, **kwargs)
        )

    return wrapper
