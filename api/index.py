"""Vercel entrypoint for the yoga studio API.

Vercel imports this module from the repository root, where the `src/`
layout is not on the path yet.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from yoga_studio.api.asgi import app  # noqa: E402

__all__ = ["app"]
