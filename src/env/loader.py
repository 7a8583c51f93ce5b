from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from gridmap.grid import DEFAULT_SYMBOLS, MapSymbols

from .schema import SolverProfile


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_CONFIG_PATH = CONFIG_ROOT / "gridmap.yaml"

# Point at a different gridmap.yaml without touching the repo copy.
CONFIG_ENV_VAR = "GRIDMAP_CONFIG"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """gridmap.yaml parsed fine but its contents are not usable."""


def _config_path(path: Optional[Path | str] = None) -> Path:
    if path is not None:
        return Path(path)
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return DEFAULT_CONFIG_PATH


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping from `path`."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _select_profile(cfg: Dict[str, Any], name: Optional[str]) -> Tuple[str, Dict[str, Any]]:
    """Return (profile_name, profile_mapping); `name` overrides the file's choice."""
    profile_name = name or cfg.get("profile")
    if not profile_name:
        raise ValueError("gridmap.yaml must define a 'profile' key.")
    profiles = cfg.get("profiles")
    if not isinstance(profiles, dict):
        raise ValueError("gridmap.yaml must define a 'profiles' mapping.")
    if profile_name not in profiles:
        raise KeyError(f"Profile '{profile_name}' not found in gridmap.yaml profiles.")
    raw = profiles[profile_name] or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Profile '{profile_name}' must be a mapping, got {type(raw)}")
    return profile_name, raw


def _build_symbols(raw: Dict[str, Any]) -> MapSymbols:
    if not raw:
        return DEFAULT_SYMBOLS
    if not isinstance(raw, dict):
        raise ConfigError(f"symbols must be a mapping, got {type(raw)}")
    unknown = set(raw) - {"open", "wall", "start", "end", "marker"}
    if unknown:
        raise ConfigError(f"Unknown symbol roles: {sorted(unknown)}")
    try:
        return MapSymbols(**raw)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


def _validate_profile(profile: SolverProfile) -> None:
    """Sanity checks beyond what the dataclasses enforce."""
    if profile.max_levels is not None:
        if isinstance(profile.max_levels, bool) or not isinstance(profile.max_levels, int):
            raise ConfigError(f"max_levels must be an integer or null, got {profile.max_levels!r}")
        if profile.max_levels <= 0:
            raise ConfigError(f"max_levels must be positive, got {profile.max_levels}")
    if profile.log_level not in _LOG_LEVELS:
        raise ConfigError(f"Invalid log_level: {profile.log_level!r}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_solver_profile(
    name: Optional[str] = None,
    path: Optional[Path | str] = None,
) -> SolverProfile:
    """Main entry point: returns a fully resolved SolverProfile."""
    cfg = _load_yaml(_config_path(path))
    profile_name, raw = _select_profile(cfg, name)

    profile = SolverProfile(
        name=profile_name,
        symbols=_build_symbols(raw.get("symbols") or {}),
        max_levels=raw.get("max_levels"),
        log_level=str(raw.get("log_level", "INFO")).upper(),
    )
    _validate_profile(profile)
    return profile

