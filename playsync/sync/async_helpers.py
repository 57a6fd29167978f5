"""Async helper utilities for per-library fan-out."""

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Awaitable, Callable, Iterable, List, Optional, TypeVar

from playsync.core.config import settings

# Shared thread pool for blocking file hashing
_executor: Optional[ThreadPoolExecutor] = None
_executor_lock = threading.Lock()

T = TypeVar("T")


def get_executor() -> ThreadPoolExecutor:
    """Get or create the shared thread pool."""
    global _executor

    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(
                max_workers=settings.THREAD_POOL_SIZE, thread_name_prefix="playsync-io"
            )

    return _executor


async def run_in_thread_pool(func: Callable[..., T], *args, **kwargs) -> T:
    """Run a synchronous function in the shared thread pool."""
    loop = asyncio.get_running_loop()
    if kwargs:
        func = partial(func, **kwargs)
    return await loop.run_in_executor(get_executor(), func, *args)


async def gather_fail_fast(
    aws: Iterable[Awaitable[T]], limit: Optional[int] = None
) -> List[T]:
    """Run awaitables concurrently and return their results in input order.

    All awaitables are scheduled together. The first exception cancels every
    task that is still pending and is re-raised; no partial results are
    returned.

    Args:
        aws: Awaitables to run, one per library
        limit: Maximum number running at once. None means unbounded.

    Returns:
        Results in the same order as ``aws``

    Raises:
        Exception: The first exception raised by any awaitable
    """
    if limit is not None and limit < 1:
        raise ValueError("limit must be a positive integer or None")

    semaphore = asyncio.Semaphore(limit) if limit is not None else None

    async def _bounded(aw: Awaitable[T]) -> T:
        async with semaphore:
            return await aw

    tasks = [
        asyncio.ensure_future(_bounded(aw) if semaphore is not None else aw) for aw in aws
    ]
    if not tasks:
        return []

    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        # Let cancelled tasks unwind before the error propagates
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
