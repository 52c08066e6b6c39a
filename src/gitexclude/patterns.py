"""Pattern compilation: raw exclude patterns into flagged rules.

Flag derivation follows git's ``parse_exclude_pattern``:

  - a leading ``!`` sets ``NEGATIVE`` and is stripped
  - a trailing ``/`` sets ``MUST_BE_DIR`` and is stripped
  - no interior ``/`` sets ``NO_DIR`` (basename-only matching)
  - ``*<literal>`` sets ``ENDS_WITH`` (literal suffix fast path)

Compilation is purely lexical and accepts every string.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Flag

from .constants import DIRECTORY_SUFFIX, GLOB_SPECIAL_CHARS, NEGATION_PREFIX, SEP


class RuleFlags(Flag):
    """Match-relevant properties derived once from a raw pattern."""

    NONE = 0
    NO_DIR = 1
    # 2 is unused, matching git's numbering.
    ENDS_WITH = 4
    MUST_BE_DIR = 8
    NEGATIVE = 16

    def __str__(self) -> str:
        return "|".join(flag.name for flag in RuleFlags if flag.value and flag in self)


def is_glob_special(char: str) -> bool:
    return char in GLOB_SPECIAL_CHARS


def simple_length(pattern: str) -> int:
    """Return the length of the literal run before the first glob metacharacter."""
    for idx, char in enumerate(pattern):
        if is_glob_special(char):
            return idx
    return len(pattern)


def no_wildcard(pattern: str) -> bool:
    return simple_length(pattern) == len(pattern)


def parse_pattern(pattern: str) -> tuple[str, RuleFlags]:
    """Strip markers from ``pattern`` and derive its flags."""
    flags = RuleFlags.NONE
    if pattern.startswith(NEGATION_PREFIX):
        flags |= RuleFlags.NEGATIVE
        pattern = pattern[1:]

    if pattern.endswith(DIRECTORY_SUFFIX):
        flags |= RuleFlags.MUST_BE_DIR
        pattern = pattern[:-1]

    first_sep = pattern.find(SEP)
    if first_sep in (-1, len(pattern) - 1):
        flags |= RuleFlags.NO_DIR

    if pattern.startswith("*") and no_wildcard(pattern[1:]):
        flags |= RuleFlags.ENDS_WITH

    return pattern, flags


@dataclass(frozen=True, slots=True)
class Rule:
    """A compiled pattern scoped to ``base``.

    ``base`` is either empty (root scope) or a directory ending in ``/``.
    ``source_position`` records declaration order for diagnostics only.
    """

    pattern: str
    base: str
    flags: RuleFlags
    source_position: int

    @property
    def negative(self) -> bool:
        return RuleFlags.NEGATIVE in self.flags

    @property
    def must_be_dir(self) -> bool:
        return RuleFlags.MUST_BE_DIR in self.flags

    @property
    def no_dir(self) -> bool:
        return RuleFlags.NO_DIR in self.flags

    @property
    def ends_with(self) -> bool:
        return RuleFlags.ENDS_WITH in self.flags

    def __str__(self) -> str:
        return (
            f"Rule{{pattern: {self.pattern}, base: {self.base}, "
            f"flags: {self.flags}, source_position: {self.source_position}}}"
        )


def compile_rule(pattern: str, base: str = "", source_position: int = 0) -> Rule:
    """Compile ``pattern`` defined in directory ``base`` into a :class:`Rule`."""
    body, flags = parse_pattern(pattern)
    return Rule(pattern=body, base=base, flags=flags, source_position=source_position)


__all__ = [
    "Rule",
    "RuleFlags",
    "compile_rule",
    "is_glob_special",
    "no_wildcard",
    "parse_pattern",
    "simple_length",
]
