"""Allow ``python -m locomotion_timeline``."""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
