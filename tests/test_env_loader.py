# tests/test_env_loader.py
"""
Tests for env.loader: YAML solver profiles.
"""

from __future__ import annotations

import importlib.util
from pathlib import Path
from textwrap import dedent

import pytest

import env.loader as loader
from env import ConfigError, SolverProfile, load_solver_profile
from gridmap import DEFAULT_SYMBOLS, MapSymbols


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "gridmap.yaml"
    path.write_text(dedent(body), encoding="utf-8")
    return path


def test_repo_config_default_profile() -> None:
    profile = load_solver_profile(path=loader.DEFAULT_CONFIG_PATH)

    assert isinstance(profile, SolverProfile)
    assert profile.name == "default"
    assert profile.symbols == DEFAULT_SYMBOLS
    assert profile.max_levels is None
    assert profile.log_level == "INFO"


def test_repo_config_named_profiles() -> None:
    roguelike = load_solver_profile("roguelike", path=loader.DEFAULT_CONFIG_PATH)
    bounded = load_solver_profile("bounded", path=loader.DEFAULT_CONFIG_PATH)

    assert roguelike.symbols == MapSymbols(open=".", wall="#", start="@", end=">", marker="o")
    assert bounded.max_levels == 10000
    assert bounded.log_level == "WARNING"


def test_env_var_overrides_config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write(tmp_path, """
        profile: tiny
        profiles:
          tiny:
            max_levels: 3
    """)
    monkeypatch.setenv(loader.CONFIG_ENV_VAR, str(path))

    profile = load_solver_profile()

    assert profile.name == "tiny"
    assert profile.max_levels == 3
    assert profile.symbols == DEFAULT_SYMBOLS


def test_partial_symbols_fall_back_to_defaults(tmp_path: Path) -> None:
    path = _write(tmp_path, """
        profile: p
        profiles:
          p:
            symbols:
              wall: "#"
            log_level: debug
    """)

    profile = load_solver_profile(path=path)

    assert profile.symbols.wall == "#"
    assert profile.symbols.open == "."
    assert profile.log_level == "DEBUG"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_solver_profile(path=tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "body, exc",
    [
        ("- just\n- a list\n", ValueError),
        ("profiles: {a: {}}\n", ValueError),
        ("profile: a\n", ValueError),
        ("profile: b\nprofiles: {a: {}}\n", KeyError),
        ("profile: a\nprofiles: {a: {symbols: {open: '..'}}}\n", ConfigError),
        ("profile: a\nprofiles: {a: {symbols: {start: '.'}}}\n", ConfigError),
        ("profile: a\nprofiles: {a: {symbols: {wall: 'X'}}}\n", ConfigError),
        ("profile: a\nprofiles: {a: {symbols: {floor: '_'}}}\n", ConfigError),
        ("profile: a\nprofiles: {a: {max_levels: 0}}\n", ConfigError),
        ("profile: a\nprofiles: {a: {max_levels: lots}}\n", ConfigError),
        ("profile: a\nprofiles: {a: {log_level: LOUD}}\n", ConfigError),
    ],
)
def test_invalid_configs(tmp_path: Path, body: str, exc: type) -> None:
    path = tmp_path / "gridmap.yaml"
    path.write_text(body, encoding="utf-8")

    with pytest.raises(exc):
        load_solver_profile(path=path)


def test_unknown_profile_name_argument() -> None:
    with pytest.raises(KeyError):
        load_solver_profile("does-not-exist", path=loader.DEFAULT_CONFIG_PATH)


def test_validate_config_tool(capsys: pytest.CaptureFixture) -> None:
    script = loader.CONFIG_ROOT / "tools" / "validate_config.py"
    spec = importlib.util.spec_from_file_location("validate_config", script)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    assert module.main(["roguelike"]) == 0
    assert "Active profile: roguelike" in capsys.readouterr().out

    assert module.main(["does-not-exist"]) == 1
    assert "Config validation FAILED" in capsys.readouterr().err
