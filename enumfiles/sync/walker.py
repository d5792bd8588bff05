"""Blocking directory and file walkers.

Both walkers build a fresh list per call. Recursion threads that list
through a nested helper so each subdirectory is emitted and fully
expanded before its next sibling.
"""

import logging
import os
from typing import List

from ..config import EntryType
from .listing import PathArg, filter_children, list_children

logger = logging.getLogger(__name__)


def walk_directories(path: PathArg, recursive: bool = False) -> List[str]:
    """Directories beneath path, never including path itself.

    Args:
        path: Root directory
        recursive: Descend into every subdirectory

    Returns:
        Directory paths in pre-order, each subtree before the next sibling
    """
    path = os.fspath(path)
    result: List[str] = []

    def _walk(directory: str) -> None:
        subdirs = filter_children(list_children(directory), EntryType.DIRECTORY)
        if not recursive:
            result.extend(subdirs)
            return
        for subdir in subdirs:
            result.append(subdir)
            _walk(subdir)

    _walk(path)
    logger.debug("Found %d directories under %s", len(result), path)
    return result


def walk_files(path: PathArg, recursive: bool = False) -> List[str]:
    """Files beneath path.

    In recursive mode the root's files come first, followed by the files
    of each directory in walk_directories order.
    """
    path = os.fspath(path)
    targets = [path]
    if recursive:
        targets.extend(walk_directories(path, recursive=True))

    result: List[str] = []
    for directory in targets:
        result.extend(filter_children(list_children(directory), EntryType.FILE))

    logger.debug("Found %d files under %s", len(result), path)
    return result
