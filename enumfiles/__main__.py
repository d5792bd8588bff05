"""Allow running as ``python -m enumfiles``."""

import sys

from .cli import main

sys.exit(main())
