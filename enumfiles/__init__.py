"""EnumFiles - Ordered file and directory enumeration.

EnumFiles lists the files or directories beneath a path, either one
level deep or across the whole subtree, and always returns them in the
same deterministic order. A path that does not exist gives an empty
list instead of an error.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from enumfiles.sync import files_recursively

Asynchronous:
    from enumfiles.aio import files_recursively
━━━━━━━━━━━━━━━━━━━━━━━━━━

Both implementations return identical results; pick the one that fits
your application.
"""

import logging

__version__ = "1.0.0"

# Library code logs only when the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export submodules for convenient access
from . import sync
from . import aio

# Users must explicitly choose their implementation
__all__ = [
    "__version__",
    "sync",
    "aio",
]
