#!/usr/bin/env python3
"""Convenience runner so `python main.py` renders a canvas without installing."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from ray_canvas.cli import main as run_cli  # noqa: E402


if __name__ == "__main__":
    sys.exit(run_cli())
