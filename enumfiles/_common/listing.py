"""Pure helpers for directory listings.

Nothing in this module touches the filesystem. The sync and aio
listing modules do the I/O and hand the raw results here.
"""

import os
import stat as stat_module  # To avoid name collision with stat results
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from ..config import EntryType


@dataclass(frozen=True)
class Listing:
    """Outcome of scanning one directory.

    There are exactly two branches: the directory was found and listed,
    or it did not exist. Any other failure is raised by the scanner and
    never becomes a Listing.
    """

    path: str
    children: Tuple[str, ...] = ()
    missing: bool = False

    @classmethod
    def found(cls, path: str, names: Iterable[str]) -> 'Listing':
        """Build the found branch from raw entry names."""
        return cls(path, tuple(join_children(path, names)))

    @classmethod
    def not_found(cls, path: str) -> 'Listing':
        """Build the missing branch."""
        return cls(path, (), True)


def join_children(parent: str, names: Iterable[str]) -> List[str]:
    """Join each name onto parent and sort by the full path string.

    Args:
        parent: Directory path as given by the caller (not normalised)
        names: Bare entry names from a directory scan

    Returns:
        Full child paths in ascending code-point order
    """
    return sorted(os.path.join(parent, name) for name in names)


def entry_type_from_stat(st: os.stat_result) -> EntryType:
    """Classify a stat result as file, directory or other."""
    if stat_module.S_ISDIR(st.st_mode):
        return EntryType.DIRECTORY
    if stat_module.S_ISREG(st.st_mode):
        return EntryType.FILE
    return EntryType.OTHER


def is_vanished_error(error: OSError) -> bool:
    """True when a stat failure means the entry is simply gone.

    NotADirectoryError shows up when a parent directory was replaced by
    a file between listing and classification.
    """
    return isinstance(error, (FileNotFoundError, NotADirectoryError))
