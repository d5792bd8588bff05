"""Blocking directory listing and entry classification."""

import logging
import os
from typing import List, Union

from .._common import Listing, entry_type_from_stat, is_vanished_error
from ..config import EntryType

logger = logging.getLogger(__name__)

PathArg = Union[str, os.PathLike]


def scan(path: PathArg) -> Listing:
    """Scan one directory into a Listing.

    The existence check runs first, so a missing path becomes the
    not-found branch while failures on an existing path raise. A
    directory removed between the check and the scan is also not-found.

    Args:
        path: Directory to scan

    Returns:
        Listing with sorted full child paths

    Raises:
        OSError: Listing failed on an existing path (permissions,
            not a directory, I/O). The original exception is raised as-is.
    """
    path = os.fspath(path)
    if not os.path.exists(path):
        logger.debug("Path does not exist, treating as empty: %s", path)
        return Listing.not_found(path)

    try:
        with os.scandir(path) as iterator:
            names = [entry.name for entry in iterator]
    except FileNotFoundError:
        # Removed between the existence check and the scan
        logger.debug("Path vanished before listing, treating as empty: %s", path)
        return Listing.not_found(path)
    return Listing.found(path, names)


def list_children(path: PathArg) -> List[str]:
    """Immediate children of a directory, sorted by full path."""
    return list(scan(path).children)


def classify(path: str) -> EntryType:
    """Classify a path by a fresh stat (symlinks are followed).

    An entry that vanished since it was listed is reported as MISSING
    instead of aborting the traversal.
    """
    try:
        st = os.stat(path)
    except OSError as e:
        if is_vanished_error(e):
            logger.debug("Entry vanished before classification: %s", path)
            return EntryType.MISSING
        raise
    return entry_type_from_stat(st)


def filter_children(children: List[str], entry_type: EntryType) -> List[str]:
    """Keep children of the given type, preserving their order."""
    return [child for child in children if classify(child) is entry_type]
