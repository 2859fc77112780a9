"""Entry point for ``python -m lexpath``."""

import sys

from lexpath.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
