"""Allow running as ``python -m queryset_gen``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
