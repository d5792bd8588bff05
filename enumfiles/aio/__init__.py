"""Asynchronous implementation of EnumFiles.

Blocking filesystem calls run in worker threads so enumeration never
blocks the event loop. Listings may overlap, but results always come
back in the same order as the synchronous implementation.
"""

# Primitives
from .listing import scan, list_children, classify, filter_children
from .walker import walk_directories, walk_files

# High-level API
from .api import (
    files,
    files_recursively,
    dir,
    dir_recursively,
)

# Configuration
from ..config import EnumConfig, EntryType

__all__ = [
    # Primitives
    'scan',
    'list_children',
    'classify',
    'filter_children',
    'walk_directories',
    'walk_files',
    # Configuration
    'EnumConfig',
    'EntryType',
    # High-level API
    'files',
    'files_recursively',
    'dir',
    'dir_recursively',
]
