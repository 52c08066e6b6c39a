"""Hierarchical gitignore-style path exclusion matching."""

import contextlib
from importlib.metadata import PackageNotFoundError, version

from .config import MatchOptions, load_match_options
from .errors import ConfigLoadError, RuleInvariantError
from .matcher import Candidate, Decision, Explanation, decide, explain, last_matching_rule
from .patterns import Rule, RuleFlags, compile_rule
from .rule_set import RuleSet

__version__ = "0.0.0"
with contextlib.suppress(PackageNotFoundError):
    if __package__ is not None:
        __version__ = version(__package__)

__all__ = [
    "Candidate",
    "ConfigLoadError",
    "Decision",
    "Explanation",
    "MatchOptions",
    "Rule",
    "RuleFlags",
    "RuleInvariantError",
    "RuleSet",
    "__version__",
    "compile_rule",
    "decide",
    "explain",
    "last_matching_rule",
    "load_match_options",
]
