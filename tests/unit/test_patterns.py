from __future__ import annotations

import pytest

from gitexclude.patterns import (
    Rule,
    RuleFlags,
    compile_rule,
    is_glob_special,
    no_wildcard,
    parse_pattern,
    simple_length,
)

pytestmark = pytest.mark.small


def test_simple_pattern_has_no_flags() -> None:
    rule = compile_rule("/simple-pattern")
    assert rule.pattern == "/simple-pattern"
    assert rule.flags == RuleFlags.NONE
    assert rule.base == ""
    assert rule.source_position == 0


def test_negation_is_stripped_and_flagged() -> None:
    rule = compile_rule("!some/path")
    assert rule.pattern == "some/path"
    assert rule.flags == RuleFlags.NEGATIVE
    assert rule.negative is True


def test_trailing_slash_sets_must_be_dir() -> None:
    rule = compile_rule("must/be/dir/")
    assert rule.pattern == "must/be/dir"
    assert rule.flags == RuleFlags.MUST_BE_DIR
    assert rule.must_be_dir is True
    assert rule.no_dir is False


def test_ends_with_literal_suffix() -> None:
    rule = compile_rule("*ends-with-this")
    assert rule.flags == RuleFlags.ENDS_WITH | RuleFlags.NO_DIR
    assert rule.ends_with is True


@pytest.mark.parametrize(
    ("raw", "pattern", "flags"),
    [
        ("foo", "foo", RuleFlags.NO_DIR),
        ("foo/", "foo", RuleFlags.NO_DIR | RuleFlags.MUST_BE_DIR),
        ("!foo/", "foo", RuleFlags.NO_DIR | RuleFlags.MUST_BE_DIR | RuleFlags.NEGATIVE),
        ("*.py", "*.py", RuleFlags.NO_DIR | RuleFlags.ENDS_WITH),
        ("*.*.too", "*.*.too", RuleFlags.NO_DIR),
        ("*[ab]", "*[ab]", RuleFlags.NO_DIR),
        ("*\\x", "*\\x", RuleFlags.NO_DIR),
        ("a/b", "a/b", RuleFlags.NONE),
        ("/*", "/*", RuleFlags.NONE),
        ("ignore-children-in-dir/*", "ignore-children-in-dir/*", RuleFlags.NONE),
        ("*/x", "*/x", RuleFlags.ENDS_WITH),
        ("*", "*", RuleFlags.NO_DIR | RuleFlags.ENDS_WITH),
    ],
)
def test_parse_pattern_flags(raw: str, pattern: str, flags: RuleFlags) -> None:
    assert parse_pattern(raw) == (pattern, flags)


def test_only_one_trailing_slash_is_stripped() -> None:
    # "a//" keeps one slash, which is the last character: still basename-only.
    assert parse_pattern("a//") == ("a/", RuleFlags.NO_DIR | RuleFlags.MUST_BE_DIR)


@pytest.mark.parametrize(
    ("raw", "flags"),
    [
        ("", RuleFlags.NO_DIR),
        ("!", RuleFlags.NO_DIR | RuleFlags.NEGATIVE),
        ("/", RuleFlags.NO_DIR | RuleFlags.MUST_BE_DIR),
        ("!/", RuleFlags.NO_DIR | RuleFlags.MUST_BE_DIR | RuleFlags.NEGATIVE),
    ],
)
def test_degenerate_patterns_compile_to_empty_rules(raw: str, flags: RuleFlags) -> None:
    rule = compile_rule(raw, "", 3)
    assert rule.pattern == ""
    assert rule.flags == flags
    assert rule.source_position == 3


def test_negation_marker_only_recognised_once() -> None:
    rule = compile_rule("!!important")
    assert rule.pattern == "!important"
    assert rule.flags == RuleFlags.NO_DIR | RuleFlags.NEGATIVE


def test_base_is_kept_verbatim() -> None:
    # Base validation happens when matching, not here.
    assert compile_rule("x/y", "not-a-dir").base == "not-a-dir"


def test_rule_is_immutable() -> None:
    rule = compile_rule("foo")
    with pytest.raises(AttributeError):
        rule.pattern = "bar"  # type: ignore[misc]


def test_glob_helpers() -> None:
    assert all(is_glob_special(c) for c in "*?[\\")
    assert not any(is_glob_special(c) for c in "]!/.-a")
    assert simple_length("abc?") == 3
    assert simple_length("abc") == 3
    assert simple_length("*abc") == 0
    assert simple_length("") == 0
    assert no_wildcard("plain/path.txt") is True
    assert no_wildcard("esc\\aped") is False


def test_flags_render_in_definition_order() -> None:
    flags = RuleFlags.NEGATIVE | RuleFlags.NO_DIR | RuleFlags.ENDS_WITH
    assert str(flags) == "NO_DIR|ENDS_WITH|NEGATIVE"
    assert str(RuleFlags.NONE) == ""


def test_flag_values_follow_git_numbering() -> None:
    assert RuleFlags.NO_DIR.value == 1
    assert RuleFlags.ENDS_WITH.value == 4
    assert RuleFlags.MUST_BE_DIR.value == 8
    assert RuleFlags.NEGATIVE.value == 16


def test_rule_str_mentions_every_field() -> None:
    rule = Rule(pattern="build", base="pkg/", flags=RuleFlags.NO_DIR | RuleFlags.MUST_BE_DIR, source_position=7)
    assert str(rule) == "Rule{pattern: build, base: pkg/, flags: NO_DIR|MUST_BE_DIR, source_position: 7}"
