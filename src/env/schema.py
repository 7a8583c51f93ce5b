# SolverProfile dataclass
# src/env/schema.py

from dataclasses import dataclass
from typing import Optional

from gridmap.grid import DEFAULT_SYMBOLS, MapSymbols


@dataclass
class SolverProfile:
    """Resolved solver settings for one named profile in gridmap.yaml."""
    name: str
    symbols: MapSymbols = DEFAULT_SYMBOLS
    max_levels: Optional[int] = None  # None: search until the frontier empties
    log_level: str = "INFO"
