#!/usr/bin/env python
"""CLI wrapper printing a portal configuration as JSON."""
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from gpportal.cli import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())
