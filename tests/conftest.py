# tests/conftest.py

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Callable

import pytest

# Ensure src/ is on sys.path for test imports like `import gridmap`, `import env`.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

MAPS_DIR = Path(__file__).resolve().parent / "maps"


@pytest.fixture
def load_map() -> Callable[[str], str]:
    """Return a loader for tests/maps/<name>.txt without its final newline."""

    def _load(name: str) -> str:
        text = (MAPS_DIR / f"{name}.txt").read_text(encoding="utf-8")
        return text[:-1] if text.endswith("\n") else text

    return _load


@pytest.fixture
def bare_root_logger():
    """Context manager that detaches root handlers, then restores them."""

    @contextmanager
    def _bare():
        root = logging.getLogger()
        saved_handlers = root.handlers[:]
        saved_level = root.level
        root.handlers = []
        try:
            yield root
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)

    return _bare
