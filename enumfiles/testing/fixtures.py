"""Test fixtures for EnumFiles consumers.

These helpers build small directory trees on disk so enumeration
results can be checked against a known layout.
"""

from pathlib import Path
from typing import Iterable, List, Union

# The reference tree. Trailing slash marks an (empty) directory.
SAMPLE_LAYOUT: List[str] = [
    "test1.txt",
    "test2.txt",
    "test1/test1.txt",
    "test1/test2.txt",
    "test1/test1_1/test1.txt",
    "test1/test1_1/test2.txt",
    "test1/test1_2/",
    "test2/",
]


def build_tree(root: Union[str, Path], layout: Iterable[str]) -> Path:
    """Materialise a layout beneath root.

    Args:
        root: Directory to build in (created if needed)
        layout: Relative paths, '/'-separated. Entries ending in '/'
            become directories, everything else an empty file. Parent
            directories are created as needed.

    Returns:
        The root as a Path
    """
    root = Path(root)
    root.mkdir(parents=True, exist_ok=True)

    for entry in layout:
        target = root.joinpath(*entry.rstrip("/").split("/"))
        if entry.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(f"contents of {entry}\n")

    return root


def count_files(root: Union[str, Path]) -> int:
    """Count regular files in the subtree, root included."""
    return sum(1 for p in Path(root).rglob("*") if p.is_file())
