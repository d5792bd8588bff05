"""Async directory listing and entry classification.

Each blocking filesystem call runs in a worker thread via
asyncio.to_thread. The semaphore is held only around that call, never
across an await on other listings, so deep recursion cannot starve it.
"""

import asyncio
import os
from typing import Any, Awaitable, Callable, Iterable, List, Optional, TypeVar

from .._common import Listing
from ..config import EntryType
from ..sync import listing as blocking
from ..sync.listing import PathArg

T = TypeVar("T")


async def gather_in_order(aws: Iterable[Awaitable[T]]) -> List[T]:
    """Run awaitables concurrently and return results in argument order.

    If one fails, the others are cancelled and awaited before the error
    propagates, so no listing outlives the traversal that started it.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def _run_blocking(
    func: Callable[..., Any],
    *args: Any,
    semaphore: Optional[asyncio.Semaphore] = None
) -> Any:
    """Run a blocking call in a thread, bounded by the semaphore if given."""
    if semaphore is None:
        return await asyncio.to_thread(func, *args)
    async with semaphore:
        return await asyncio.to_thread(func, *args)


async def scan(
    path: PathArg,
    *,
    semaphore: Optional[asyncio.Semaphore] = None
) -> Listing:
    """Scan one directory without blocking the event loop.

    Raises:
        OSError: Listing failed on an existing path, raised unchanged
    """
    return await _run_blocking(blocking.scan, os.fspath(path), semaphore=semaphore)


async def list_children(
    path: PathArg,
    *,
    semaphore: Optional[asyncio.Semaphore] = None
) -> List[str]:
    """Immediate children of a directory, sorted by full path."""
    listing = await scan(path, semaphore=semaphore)
    return list(listing.children)


async def classify(
    path: str,
    *,
    semaphore: Optional[asyncio.Semaphore] = None
) -> EntryType:
    """Classify a path by a fresh stat; vanished entries are MISSING."""
    return await _run_blocking(blocking.classify, path, semaphore=semaphore)


async def filter_children(
    children: List[str],
    entry_type: EntryType,
    *,
    semaphore: Optional[asyncio.Semaphore] = None,
    concurrent: bool = True
) -> List[str]:
    """Keep children of the given type, preserving their order.

    Args:
        children: Sorted child paths
        entry_type: Type to keep
        semaphore: Limits blocking calls in flight
        concurrent: Classify all children at once instead of one by one

    Returns:
        Matching children in their original order
    """
    if concurrent:
        types = await gather_in_order(
            classify(child, semaphore=semaphore) for child in children
        )
    else:
        types = [await classify(child, semaphore=semaphore) for child in children]

    return [child for child, kind in zip(children, types) if kind is entry_type]
