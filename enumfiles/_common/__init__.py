"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .listing import (
    Listing,
    join_children,
    entry_type_from_stat,
    is_vanished_error,
)

__all__ = [
    'Listing',
    'join_children',
    'entry_type_from_stat',
    'is_vanished_error',
]
