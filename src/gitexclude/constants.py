"""Project-wide constants and small enums."""

from __future__ import annotations

from enum import StrEnum

# Path separator used by candidates, bases and patterns.
SEP = "/"

# Pattern prefix and suffix markers.
NEGATION_PREFIX = "!"
DIRECTORY_SUFFIX = SEP

# Characters the glob engine treats specially.
GLOB_SPECIAL_CHARS = frozenset("*?[\\")

# Configuration keys and sources
CONFIG_CASE_FOLD = "case_fold"
TOML_CONFIG = ".gitexclude.toml"
PYPROJECT_TOOL_TABLE = "gitexclude"
ENV_CASE_FOLD = "GITEXCLUDE_CASE_FOLD"

# Platforms whose default filesystems compare names case-insensitively.
CASE_INSENSITIVE_PLATFORMS = frozenset({"win32", "cygwin", "darwin"})


class CaseFoldSetting(StrEnum):
    """Symbolic values accepted for ``case_fold`` besides booleans."""

    AUTO = "auto"
