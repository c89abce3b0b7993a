"""Allow running appcli as ``python -m appcli``."""

import sys

from appcli.cli import main

if __name__ == "__main__":
    sys.exit(main())
