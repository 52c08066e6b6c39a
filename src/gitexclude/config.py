"""Matcher configuration: bundled defaults, project TOML files and the environment."""

from __future__ import annotations

import importlib.resources
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from .constants import (
    CASE_INSENSITIVE_PLATFORMS,
    CONFIG_CASE_FOLD,
    ENV_CASE_FOLD,
    PYPROJECT_TOOL_TABLE,
    TOML_CONFIG,
    CaseFoldSetting,
)
from .errors import ERROR_MSG_EXPLICIT_CONFIG_MISSING, ConfigLoadError

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class MatchOptions:
    """Options threaded into every comparison the matcher makes."""

    case_fold: bool = False


def load_default_config() -> dict[str, Any]:
    """Return the bundled default configuration as a Python dict."""
    try:
        cfg_path = importlib.resources.files("gitexclude.resources").joinpath("default_config.toml")
        text = cfg_path.read_text(encoding="utf-8")
    except OSError as err:  # pragma: no cover - packaging problem
        msg = f"Error loading default configuration: {err}"
        raise ConfigLoadError(msg) from err
    return _parse(text, "default_config.toml")


def _parse(text: str, label: str) -> dict[str, Any]:
    try:
        return tomlkit.loads(text).unwrap()
    except TOMLKitError as e:
        msg = f"Error parsing {label}: {e}"
        raise ConfigLoadError(msg) from e


def load_toml_config(path: Path) -> dict[str, Any]:
    """Load configuration from a TOML file."""
    return _parse(path.read_text(encoding="utf-8"), path.name)


def _project_table(pyproject_path: Path) -> dict[str, Any]:
    """Return the ``[tool.gitexclude]`` table of a pyproject file, or ``{}``."""
    tool = load_toml_config(pyproject_path).get("tool", {})
    table = tool.get(PYPROJECT_TOOL_TABLE) if isinstance(tool, dict) else None
    return table if isinstance(table, dict) else {}


def read_config(*, base_path: Path, explicit_config: Path | None = None) -> dict[str, Any]:
    """Merge the bundled defaults with the project's own settings.

    Sources, later ones winning: bundled defaults, ``[tool.gitexclude]`` in
    ``base_path/pyproject.toml``, ``base_path/.gitexclude.toml``, then
    ``explicit_config``, which must exist when given.
    """
    if explicit_config is not None and not explicit_config.exists():
        msg = f"{ERROR_MSG_EXPLICIT_CONFIG_MISSING}: {explicit_config}"
        raise ConfigLoadError(msg)

    cfg = load_default_config()
    pyproject = base_path / "pyproject.toml"
    if pyproject.exists():
        cfg |= _project_table(pyproject)
    for path in (base_path / TOML_CONFIG, explicit_config):
        if path is not None and path.exists():
            cfg |= load_toml_config(path)
    return cfg


def platform_case_fold(platform: str | None = None) -> bool:
    """Return whether ``platform`` (default: this one) folds case by default."""
    return (platform or sys.platform) in CASE_INSENSITIVE_PLATFORMS


def coerce_case_fold(value: object) -> bool:
    """Interpret a ``case_fold`` setting from a config file or the environment."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == CaseFoldSetting.AUTO:
            return platform_case_fold()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False
    msg = f"Invalid {CONFIG_CASE_FOLD} setting: {value!r} (expected true, false or 'auto')"
    raise ConfigLoadError(msg)


def load_match_options(*, base_path: Path, explicit_config: Path | None = None) -> MatchOptions:
    """Resolve :class:`MatchOptions` from config files and the environment."""
    cfg = read_config(base_path=base_path, explicit_config=explicit_config)
    raw = cfg.get(CONFIG_CASE_FOLD, False)
    env_value = os.environ.get(ENV_CASE_FOLD)
    if env_value:
        raw = env_value
    return MatchOptions(case_fold=coerce_case_fold(raw))
