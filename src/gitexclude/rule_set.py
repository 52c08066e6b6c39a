"""Ordered, append-only collections of compiled rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .patterns import Rule, compile_rule

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class RuleSet:
    """Rules for one ignore scope, kept in declaration order.

    Later rules take precedence when matching. The set has no removal
    operation; populate it fully before sharing it between threads.
    """

    __slots__ = ("_rules",)

    def __init__(self) -> None:
        self._rules: list[Rule] = []

    def add(self, pattern: str, base: str = "", source_position: int | None = None) -> None:
        """Compile ``pattern`` and append it.

        ``source_position`` defaults to the current number of rules.
        """
        if source_position is None:
            source_position = len(self._rules)
        self._rules.append(compile_rule(pattern, base, source_position))

    def extend(self, patterns: Iterable[str], base: str = "") -> None:
        for pattern in patterns:
            self.add(pattern, base)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    @property
    def has_negations(self) -> bool:
        return any(rule.negative for rule in self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __reversed__(self) -> Iterator[Rule]:
        return reversed(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({[str(rule) for rule in self._rules]!r})"


__all__ = ["RuleSet"]
