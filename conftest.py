"""Test configuration for dataproxy_bench.

Places the local `src` directory on sys.path so the flat modules
(`consumer`, `reporter`, `cli`, ...) import without an editable install.
"""
from __future__ import annotations

import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parent
SRC = ROOT / "src"

def _ensure(p: pathlib.Path):
    sp = str(p)
    if p.is_dir() and sp not in sys.path:
        sys.path.insert(0, sp)

_ensure(SRC)
