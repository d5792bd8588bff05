"""Synchronous implementation of EnumFiles.

All components here operate in a blocking, sequential manner.
"""

# Primitives
from .listing import scan, list_children, classify, filter_children
from .walker import walk_directories, walk_files

# Configuration
from ..config import EnumConfig, EntryType

# High-level API
from .api import (
    files,
    files_recursively,
    dir,
    dir_recursively,
)

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
