"""High-level blocking API for EnumFiles.

Four entry points, each a thin pass-through to a walker. A path that
does not exist yields an empty list; any other filesystem failure is
raised unchanged.
"""

from typing import List

from . import walker
from .listing import PathArg


def files(path: PathArg) -> List[str]:
    """Files directly under path."""
    return walker.walk_files(path, False)


def files_recursively(path: PathArg) -> List[str]:
    """Files under path and all of its descendants."""
    return walker.walk_files(path, True)


def dir(path: PathArg) -> List[str]:
    """Directories directly under path."""
    return walker.walk_directories(path, False)


def dir_recursively(path: PathArg) -> List[str]:
    """Directories under path and all of its descendants.

    Example:
        >>> dir_recursively('test/testFolder')
        ['test/testFolder/test1', 'test/testFolder/test1/test1_1',
         'test/testFolder/test1/test1_2', 'test/testFolder/test2']
    """
    return walker.walk_directories(path, True)
