"""Glob primitive backed by pathspec's gitignore wildmatch translation.

Only ``match`` is used by the matcher. Patterns are translated to regular
expressions by :class:`pathspec.patterns.GitWildMatchPattern` and cached per
case policy. pathspec's translation also accepts everything below a matching
path; that descendant tail is removed so ``*`` and ``?`` never cross a
separator unless the pattern says ``**``.
"""

from __future__ import annotations

import functools
import re

from pathspec.patterns import GitWildMatchPattern

from .constants import NEGATION_PREFIX, SEP
from .logging_utils import get_logger

logger = get_logger(__name__)

# Leading characters pathspec would read as negation or comment markers.
_MARKER_PREFIXES = (NEGATION_PREFIX, "#")

# Optional "anything below this path" group pathspec appends to file patterns.
_DESCENDANT_TAIL = re.compile(r"\(\?:(?:\(\?P<\w+>/\)|/)\.\*\)\?\$$")


def _escape(char: str) -> str:
    return "\\" + char


def _protect_edges(pattern: str) -> str:
    """Escape leading and trailing whitespace, which pathspec would strip."""
    if not pattern.strip():
        return "".join(_escape(c) for c in pattern)
    start = len(pattern) - len(pattern.lstrip())
    end = len(pattern.rstrip())
    core = pattern[start:end]
    trailing = pattern[end:]
    if trailing and core.endswith("\\"):
        # first trailing character is already escaped
        core += trailing[0]
        trailing = trailing[1:]
    return "".join(_escape(c) for c in pattern[:start]) + core + "".join(_escape(c) for c in trailing)


@functools.lru_cache(maxsize=1024)
def _compile(pattern: str, *, case_fold: bool) -> re.Pattern[str] | None:
    if not pattern:
        return None
    translated = _protect_edges(pattern)
    if translated.startswith(_MARKER_PREFIXES):
        translated = _escape(translated)
    try:
        regex, _include = GitWildMatchPattern.pattern_to_regex(translated)
    except ValueError as err:
        logger.debug("wildmatch: rejected pattern %r: %s", pattern, err)
        return None
    if regex is None:
        return None
    if pattern.rstrip(SEP).rpartition(SEP)[2] != "**":
        regex = _DESCENDANT_TAIL.sub("$", regex)
    return re.compile(regex, re.IGNORECASE if case_fold else 0)


def match(pattern: str, candidate: str, *, case_fold: bool = False) -> bool:
    """Return whether ``candidate`` matches the wildmatch ``pattern``.

    An empty pattern, or one the engine cannot translate, matches nothing.
    """
    compiled = _compile(pattern, case_fold=case_fold)
    if compiled is None:
        return False
    return compiled.match(candidate) is not None


def clear_cache() -> None:
    """Drop every cached pattern translation."""
    _compile.cache_clear()


__all__ = ["clear_cache", "match"]
