from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gitexclude import wildmatch
from gitexclude.constants import ENV_CASE_FOLD
from gitexclude.rule_set import RuleSet

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a case policy set in the calling shell out of every test."""
    monkeypatch.delenv(ENV_CASE_FOLD, raising=False)


@pytest.fixture(autouse=True)
def _fresh_wildmatch_cache() -> Iterator[None]:
    yield
    wildmatch.clear_cache()


@pytest.fixture
def make_rule_set() -> Callable[..., RuleSet]:
    """Return a factory building a rule set from raw patterns sharing one base."""

    def _make(*patterns: str, base: str = "") -> RuleSet:
        rule_set = RuleSet()
        rule_set.extend(patterns, base)
        return rule_set

    return _make
