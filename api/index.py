"""Serverless entrypoint exposing the health journal app from ``src/``."""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from health_journal.api.asgi import app  # noqa: E402

__all__ = ["app"]
