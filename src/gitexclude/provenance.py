"""Helpers for rendering match provenance to stable dictionaries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .patterns import RuleFlags

if TYPE_CHECKING:
    from .matcher import Explanation
    from .patterns import Rule


def _flag_names(flags: RuleFlags) -> list[str]:
    return sorted(flag.name for flag in RuleFlags if flag.value and flag in flags)


def rule_to_dict(rule: Rule) -> dict[str, Any]:
    """Return a JSON-friendly dict describing a compiled rule."""
    return {
        "pattern": rule.pattern,
        "base": rule.base,
        "flags": _flag_names(rule.flags),
        "negated": rule.negative,
        "source_position": rule.source_position,
    }


def explanation_to_dict(explanation: Explanation) -> dict[str, Any]:
    """Return a JSON-friendly dict describing a decision and its deciding rule."""
    rule = explanation.rule
    return {
        "path": explanation.candidate.path,
        "is_dir": explanation.candidate.is_dir,
        "decision": str(explanation.decision),
        "rule": rule_to_dict(rule) if rule is not None else None,
    }
