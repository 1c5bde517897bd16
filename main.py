"""Development entrypoint, e.g. ``python main.py serve --reload`` or ``python main.py draft Celts``."""

from __future__ import annotations

import sys

from pocketdraft.cli import main

if __name__ == "__main__":
    sys.exit(main())
