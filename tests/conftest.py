"""Shared pytest setup.

The demo harness (`main`) and the env loader (`config`) live directly in
`src/` and are not installed with the `treasuredata` package, so `src/` is
put on `sys.path` before collection.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"


def pytest_configure() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))
