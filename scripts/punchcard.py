#!/usr/bin/env python3
"""
CLI: punchcard heatmap of timestamps on stdin, without installing the package.
Usage:
  python scripts/punchcard.py --gradient fire --scale < times.txt
  printf '2023-01-02 08:00:00 +0000\t2023-01-02 11:00:00 +0000\n' | python scripts/punchcard.py --margins
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from punchcard.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
