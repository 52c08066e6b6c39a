"""Last-match-wins evaluation of a rule set against a candidate path.

Mirrors git's ``last_exclude_matching_from_list``: rules are scanned from the
most recently added to the first, and the first rule that matches decides.
Rules without an interior separator match the candidate's basename; all
others match the path relative to the rule's base directory. Both routes try
cheap literal comparisons before delegating to the wildmatch engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from . import wildmatch
from .constants import SEP
from .errors import RuleInvariantError
from .logging_utils import StructuredLogEvent, get_logger, log_event
from .patterns import simple_length

if TYPE_CHECKING:
    from pathlib import PurePath

    from .patterns import Rule
    from .rule_set import RuleSet

logger = get_logger(__name__)


class Decision(IntEnum):
    """Outcome of evaluating a candidate; values follow git's convention."""

    EXCLUDED = 1
    INCLUDED = 0
    UNDECIDED = -1

    def __str__(self) -> str:
        return self.name.capitalize()

    @property
    def excluded(self) -> bool:
        return self is Decision.EXCLUDED


@dataclass(frozen=True, slots=True)
class Candidate:
    """A path relative to the rule set's root plus its directory classification."""

    path: str
    is_dir: bool = False

    @classmethod
    def from_path(cls, path: PurePath, *, is_dir: bool) -> Candidate:
        return cls(path=path.as_posix(), is_dir=is_dir)

    @property
    def basename(self) -> str:
        """Final path segment; "." for an empty path and "/" for a root-only one."""
        stripped = self.path.rstrip(SEP)
        if not stripped:
            return SEP if self.path else "."
        return stripped.rpartition(SEP)[2]


@dataclass(frozen=True, slots=True)
class Explanation:
    """The decision for a candidate and the rule that produced it, if any."""

    candidate: Candidate
    decision: Decision
    rule: Rule | None = None


def _fspathncmp(a: str, b: str, count: int, *, case_fold: bool) -> bool:
    """Compare the first ``count`` characters of ``a`` and ``b``."""
    a, b = a[:count], b[:count]
    if case_fold:
        return a.casefold() == b.casefold()
    return a == b


def match_basename(candidate: Candidate, rule: Rule, *, case_fold: bool = False) -> bool:
    """Match ``rule`` against the final path segment of ``candidate``."""
    pattern = rule.pattern
    basename = candidate.basename
    prefix = simple_length(pattern)

    if prefix == len(pattern):
        return len(pattern) == len(basename) and _fspathncmp(pattern, basename, len(basename), case_fold=case_fold)

    if rule.ends_with:
        # "*literal" against "fooliteral"
        suffix = pattern[1:]
        if len(suffix) > len(basename):
            return False
        tail = basename[len(basename) - len(suffix) :]
        return _fspathncmp(suffix, tail, len(suffix), case_fold=case_fold)

    return wildmatch.match(pattern, basename, case_fold=case_fold)


def match_pathname(candidate: Candidate, rule: Rule, *, case_fold: bool = False) -> bool:
    """Match ``rule`` against ``candidate``'s path relative to the rule's base."""
    path = candidate.path
    base = rule.base
    base_len = len(base) - 1 if base.endswith(SEP) else len(base)

    if (
        len(path) < base_len + 1
        or (base_len != 0 and path[base_len] != SEP)
        or not _fspathncmp(path, base, base_len, case_fold=case_fold)
    ):
        logger.debug("match_pathname: %r is not under base %r", path, base)
        return False

    # A leading "/" anchors the pattern to the base itself.
    pattern = rule.pattern.removeprefix(SEP)
    name = path[base_len:].removeprefix(SEP)

    prefix = simple_length(pattern)
    if prefix > 0:
        if prefix > len(name):
            logger.debug("match_pathname: literal prefix %r longer than %r", pattern[:prefix], name)
            return False
        if not _fspathncmp(pattern, name, prefix, case_fold=case_fold):
            logger.debug("match_pathname: literal prefix %r does not match %r", pattern[:prefix], name)
            return False

        pattern = pattern[prefix:]
        name = name[prefix:]
        # A pattern without wildcards is fully decided by the prefix comparison.
        if not pattern and not name:
            return True

    logger.debug("match_pathname: wildmatch(%r, %r)", pattern, path)
    return wildmatch.match(pattern, path, case_fold=case_fold)


def last_matching_rule(candidate: Candidate, rule_set: RuleSet, *, case_fold: bool = False) -> Rule | None:
    """Return the last rule in ``rule_set`` that matches ``candidate``.

    Returns ``None`` when no rule matches. Raises :class:`RuleInvariantError`
    if a rule needing a pathname match has a malformed base.
    """
    for rule in reversed(rule_set):
        if rule.must_be_dir and not candidate.is_dir:
            logger.debug("skip %s: directory-only rule, %r is not a directory", rule, candidate.path)
            continue

        if rule.no_dir:
            if match_basename(candidate, rule, case_fold=case_fold):
                return rule
            continue

        if rule.base and not rule.base.endswith(SEP):
            raise RuleInvariantError(rule, rule.base)

        if match_pathname(candidate, rule, case_fold=case_fold):
            return rule
    return None


def is_excluded_from_list(candidate: Candidate, rule_set: RuleSet, *, case_fold: bool = False) -> Decision:
    return _evaluate(candidate, rule_set, case_fold=case_fold).decision


def _evaluate(candidate: Candidate, rule_set: RuleSet, *, case_fold: bool) -> Explanation:
    rule = last_matching_rule(candidate, rule_set, case_fold=case_fold)
    if rule is None:
        decision = Decision.UNDECIDED
    elif rule.negative:
        decision = Decision.INCLUDED
    else:
        decision = Decision.EXCLUDED

    if logger.isEnabledFor(logging.DEBUG):
        log_event(
            logger,
            StructuredLogEvent(
                name="match.decision",
                message="evaluated candidate against rule set",
                level=logging.DEBUG,
                context={
                    "path": candidate.path,
                    "is_dir": candidate.is_dir,
                    "decision": decision,
                    "rule": str(rule) if rule is not None else None,
                    "rule_count": len(rule_set),
                },
            ),
        )
    return Explanation(candidate=candidate, decision=decision, rule=rule)


def decide(candidate_path: str, is_directory: bool, rule_set: RuleSet, *, case_fold: bool = False) -> Decision:
    """Return whether ``candidate_path`` is excluded, included or undecided."""
    return is_excluded_from_list(Candidate(candidate_path, is_directory), rule_set, case_fold=case_fold)


def explain(candidate_path: str, is_directory: bool, rule_set: RuleSet, *, case_fold: bool = False) -> Explanation:
    """Like :func:`decide`, but also report the deciding rule."""
    return _evaluate(Candidate(candidate_path, is_directory), rule_set, case_fold=case_fold)


__all__ = [
    "Candidate",
    "Decision",
    "Explanation",
    "decide",
    "explain",
    "is_excluded_from_list",
    "last_matching_rule",
    "match_basename",
    "match_pathname",
]
