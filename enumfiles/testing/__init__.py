"""Testing utilities for EnumFiles.

This module provides helpers for building directory trees in tests
without hand-writing mkdir/touch sequences.
"""

from .fixtures import SAMPLE_LAYOUT, build_tree, count_files

__all__ = ['SAMPLE_LAYOUT', 'build_tree', 'count_files']
