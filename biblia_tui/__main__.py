"""Entry point for biblia-tui."""

import sys

from biblia_tui.cli import main


if __name__ == "__main__":
    sys.exit(main())
