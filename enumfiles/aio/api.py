"""High-level async API for EnumFiles.

This module provides the four public coroutines. Each one is a
pass-through to a walker: a path that does not exist resolves to an
empty list, any other filesystem failure is raised unchanged.
"""

from typing import List, Optional

from ..config import EnumConfig
from ..sync.listing import PathArg
from . import walker


async def files(path: PathArg, *, config: Optional[EnumConfig] = None) -> List[str]:
    """Files directly under path.

    Args:
        path: Directory to list
        config: Execution settings

    Returns:
        File paths in ascending order
    """
    return await walker.walk_files(path, False, config=config)


async def files_recursively(
    path: PathArg,
    *,
    config: Optional[EnumConfig] = None
) -> List[str]:
    """Files under path and all of its descendants.

    The root's own files come first, then each subdirectory's files in
    the order dir_recursively reports the directories.

    Example:
        >>> await files_recursively('test/testFolder')
        ['test/testFolder/test1.txt', 'test/testFolder/test2.txt',
         'test/testFolder/test1/test1.txt', ...]
    """
    return await walker.walk_files(path, True, config=config)


async def dir(path: PathArg, *, config: Optional[EnumConfig] = None) -> List[str]:
    """Directories directly under path."""
    return await walker.walk_directories(path, False, config=config)


async def dir_recursively(
    path: PathArg,
    *,
    config: Optional[EnumConfig] = None
) -> List[str]:
    """Directories under path and all of its descendants.

    Each directory is followed by its whole subtree before its next
    sibling. The root itself is never included.
    """
    return await walker.walk_directories(path, True, config=config)
