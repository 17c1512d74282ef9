"""CLI entry point for the ClickUp timer helper."""

from __future__ import annotations

import sys

from clickup_timer.cli import main

if __name__ == "__main__":
    sys.exit(main())
