"""Bus arrival collector: runs a batch now and every interval after."""

from __future__ import annotations

from arrival_logger.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
