"""Allow running as ``python -m nfasim``."""

import sys

from nfasim.cli import main

if __name__ == "__main__":
    sys.exit(main())
