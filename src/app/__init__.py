# src/app/__init__.py
"""
Application entrypoints for gridmap.

Exposes:
- solve_text: config-aware wrapper around the gridmap core
- SolveReport: outcome of one solve_text call
- configure_logging: root logging setup
"""

from __future__ import annotations

from .logging_config import configure_logging
from .runtime import SolveReport, solve_text

__all__ = [
    "SolveReport",
    "solve_text",
    "configure_logging",
]
