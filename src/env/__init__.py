# src/env/__init__.py
"""
Solver configuration: YAML profiles of map symbols and search limits.
"""

from __future__ import annotations

from .loader import ConfigError, load_solver_profile
from .schema import SolverProfile

__all__ = [
    "ConfigError",
    "SolverProfile",
    "load_solver_profile",
]
