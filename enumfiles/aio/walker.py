"""Async directory and file walkers.

With config.concurrent set, sibling subtrees and per-directory file
listings are fetched in parallel and stitched back together in
argument order, so the output always matches the sequential walk. The
first failure cancels the outstanding listings and propagates; no
partial list is returned.
"""

import asyncio
import logging
import os
from typing import List, Optional

from ..config import EntryType, EnumConfig
from ..sync.listing import PathArg
from .listing import filter_children, gather_in_order, list_children

logger = logging.getLogger(__name__)


async def walk_directories(
    path: PathArg,
    recursive: bool = False,
    *,
    config: Optional[EnumConfig] = None
) -> List[str]:
    """Directories beneath path, never including path itself.

    Args:
        path: Root directory
        recursive: Descend into every subdirectory
        config: Execution settings (defaults to EnumConfig())

    Returns:
        Directory paths in pre-order, each subtree before the next sibling
    """
    config = config or EnumConfig()
    semaphore = asyncio.Semaphore(config.max_concurrent)
    path = os.fspath(path)

    async def _subdirs(directory: str) -> List[str]:
        children = await list_children(directory, semaphore=semaphore)
        return await filter_children(
            children,
            EntryType.DIRECTORY,
            semaphore=semaphore,
            concurrent=config.concurrent
        )

    async def _expand(directory: str) -> List[str]:
        """Subtree of directory as one ordered list."""
        subdirs = await _subdirs(directory)
        subtrees = await gather_in_order(_expand(subdir) for subdir in subdirs)
        expanded: List[str] = []
        for subdir, subtree in zip(subdirs, subtrees):
            expanded.append(subdir)
            expanded.extend(subtree)
        return expanded

    result: List[str] = []

    async def _walk(directory: str) -> None:
        for subdir in await _subdirs(directory):
            result.append(subdir)
            await _walk(subdir)

    if not recursive:
        result = await _subdirs(path)
    elif config.concurrent:
        result = await _expand(path)
    else:
        await _walk(path)

    logger.debug("Found %d directories under %s", len(result), path)
    return result


async def walk_files(
    path: PathArg,
    recursive: bool = False,
    *,
    config: Optional[EnumConfig] = None
) -> List[str]:
    """Files beneath path.

    In recursive mode the root's files come first, followed by the files
    of each directory in walk_directories order.
    """
    config = config or EnumConfig()
    path = os.fspath(path)
    targets = [path]
    if recursive:
        targets.extend(await walk_directories(path, True, config=config))

    semaphore = asyncio.Semaphore(config.max_concurrent)

    async def _files_in(directory: str) -> List[str]:
        children = await list_children(directory, semaphore=semaphore)
        return await filter_children(
            children,
            EntryType.FILE,
            semaphore=semaphore,
            concurrent=config.concurrent
        )

    if config.concurrent:
        per_directory = await gather_in_order(_files_in(d) for d in targets)
    else:
        per_directory = [await _files_in(d) for d in targets]

    result = [file for files in per_directory for file in files]
    logger.debug("Found %d files under %s", len(result), path)
    return result
