import re

import pytest

from tabfill.exceptions import InvalidSourceError, TabfillError
from tabfill.registry import CompletionRegistry
from tabfill.rules import RuleKind
from tabfill.source import CompletionSource


@pytest.fixture
def registry():
    return CompletionRegistry()


def test_register_bare_list(registry):
    registry.register(["help", "history"])
    source = registry.get("")
    assert source.completions == ["help", "history"]
    assert source.rule.kind is RuleKind.UNCONDITIONAL
    assert source.strict is False


def test_register_mapping(registry):
    registry.register(
        {"prefix": "git ", "strict": True, "completions": ["git commit"]}, "git"
    )
    source = registry.get("git")
    assert source.rule.kind is RuleKind.LITERAL
    assert source.rule.literal == "git "
    assert source.strict is True


def test_register_source_object(registry):
    source = CompletionSource(completions=["a"], prefix=["x", "y"])
    registry.register(source, "k")
    assert registry.get("k").rule.kind is RuleKind.LIST
    assert registry.get("k").rule.literals == ("x", "y")


def test_register_pattern(registry):
    registry.register({"prefix": re.compile(r"^cd\s"), "completions": ["cd src/"]}, "cd")
    assert registry.get("cd").rule.kind is RuleKind.PATTERN


def test_merge_prepends_missing_old_completions(registry):
    registry.register(["a", "b", "c"], "k")
    registry.register(["c", "d"], "k")
    assert registry.get("k").completions == ["a", "b", "c", "d"]


def test_merge_keeps_relative_order_of_old_completions(registry):
    registry.register(["z", "a", "m"], "k")
    registry.register(["a", "q"], "k")
    assert registry.get("k").completions == ["z", "m", "a", "q"]


def test_merge_new_rule_and_strictness_win(registry):
    registry.register({"prefix": "x", "strict": True, "completions": ["one"]}, "k")
    registry.register({"prefix": ["y"], "completions": ["two"]}, "k")
    source = registry.get("k")
    assert source.completions == ["one", "two"]
    assert source.rule.kind is RuleKind.LIST
    assert source.strict is False


def test_replace_overwrites(registry):
    registry.register(["a", "b"], "k")
    registry.register(["c"], "k", replace=True)
    assert registry.get("k").completions == ["c"]


def test_bool_key_means_replace(registry):
    registry.register(["a", "b"])
    registry.register(["c"], True)
    assert registry.keys() == [""]
    assert registry.get("").completions == ["c"]


def test_clear_key_with_empty_replace(registry):
    registry.register(["a", "b"], "k")
    registry.register([], "k", replace=True)
    assert registry.get("k").completions == []
    assert registry.complete("").completions == []


def test_replace_is_idempotent(registry):
    source = {"prefix": "", "completions": ["help", "history", "halt"]}
    registry.register(source, "k", replace=True)
    once = registry.complete("h")
    registry.register(source, "k", replace=True)
    assert registry.complete("h") == once


def test_caller_list_is_not_mutated(registry):
    original = ["a"]
    registry.register(["b"], "k")
    registry.register(original, "k")
    assert original == ["a"]
    assert registry.get("k").completions == ["b", "a"]


def test_separate_keys_are_independent(registry):
    registry.register(["a"], "one")
    registry.register(["b"], "two")
    assert "one" in registry
    assert len(registry) == 2
    assert registry.get("one").completions == ["a"]
    assert registry.get("missing") is None


def test_clear(registry):
    registry.register(["a"], "one")
    registry.clear()
    assert len(registry) == 0


@pytest.mark.parametrize(
    "bad",
    [
        "not a list",
        42,
        [1, 2],
        {"completions": ["a"], "prefix": 3},
        {"completions": ["a"], "prefix": ["ok", 1]},
        {"completions": ["a"], "unknown": True},
    ],
)
def test_invalid_sources_raise(registry, bad):
    with pytest.raises(InvalidSourceError):
        registry.register(bad)
    assert len(registry) == 0


def test_invalid_source_error_is_tabfill_error():
    assert issubclass(InvalidSourceError, TabfillError)


def test_stored_source_keeps_registered_prefix(registry):
    source = CompletionSource(completions=["git commit"], prefix="git ")
    registry.register(source, "git")
    assert registry.get("git").prefix == "git "
    assert registry.get("git") == source
    assert registry.get("git") is not source


@pytest.mark.parametrize("strict", ["false", 0, None])
def test_non_bool_strict_raises(registry, strict):
    with pytest.raises(InvalidSourceError, match="strict"):
        registry.register({"strict": strict, "completions": ["foo"]})


def test_iterating_registry_yields_sources(registry):
    registry.register(["a"], "one")
    registry.register(["b"], "two")
    assert [source.completions for source in registry] == [["a"], ["b"]]
