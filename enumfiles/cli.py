"""Command-line interface for EnumFiles.

Usage:
    enumfiles files PATH              # Files directly under PATH
    enumfiles files PATH -r           # Files in the whole subtree
    enumfiles dirs PATH --recursive   # Directories in the whole subtree
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from . import __version__
from .aio import api
from .config import EnumConfig


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="enumfiles",
        description="List files or directories beneath a path in a stable order"
    )
    parser.add_argument("--version", action="version", version=f"enumfiles {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("kind", choices=["files", "dirs"],
                        help="What to enumerate")
    parser.add_argument("path", help="Directory to enumerate")
    parser.add_argument("-r", "--recursive", action="store_true",
                        help="Include all descendants")
    parser.add_argument("--sequential", action="store_true",
                        help="Await each listing before starting the next")
    parser.add_argument("--max-concurrent", type=int,
                        default=EnumConfig().max_concurrent,
                        help="Maximum blocking filesystem calls in flight")
    return parser


async def enumerate_paths(
    kind: str,
    path: str,
    recursive: bool,
    config: EnumConfig
) -> List[str]:
    """Dispatch to the matching public operation."""
    if kind == "files":
        operation = api.files_recursively if recursive else api.files
    else:
        operation = api.dir_recursively if recursive else api.dir
    return await operation(path, config=config)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        config = EnumConfig(
            max_concurrent=args.max_concurrent,
            concurrent=not args.sequential
        )
    except ValueError as e:
        print(f"enumfiles: {e}", file=sys.stderr)
        return 2

    try:
        paths = asyncio.run(enumerate_paths(args.kind, args.path, args.recursive, config))
    except OSError as e:
        print(f"enumfiles: {e}", file=sys.stderr)
        return 1

    for path in paths:
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
