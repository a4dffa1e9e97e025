import re

from tabfill.builders import after, directory_entries, unless, when, words
from tabfill.registry import CompletionRegistry
from tabfill.rules import RuleKind


def test_words():
    source = words(["a", "b"], strict=True)
    assert source.rule.kind is RuleKind.UNCONDITIONAL
    assert source.strict is True


def test_after():
    source = after("git ", ["git commit"])
    assert source.rule.kind is RuleKind.LITERAL
    assert source.rule.literal == "git "


def test_after_empty_prefix_is_unconditional():
    assert after("", ["a"]).rule.kind is RuleKind.UNCONDITIONAL


def test_unless():
    source = unless(["cd "], ["cd"])
    assert source.rule.kind is RuleKind.LIST
    assert source.rule.literals == ("cd ",)


def test_when_accepts_string_or_compiled_pattern():
    assert when(r"^cd\s", ["cd x"]).rule.pattern.pattern == r"^cd\s"
    compiled = re.compile("^ls")
    assert when(compiled, ["ls x"]).rule.pattern is compiled


def test_when_wraps_another_source():
    source = when(r"^ls\s", words(["ls a", "ls b"], strict=True))
    assert source.completions == ["ls a", "ls b"]
    assert source.strict is True
    assert source.rule.kind is RuleKind.PATTERN


def test_directory_entries(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "setup.py").touch()
    (tmp_path / ".hidden").touch()
    source = directory_entries(tmp_path)
    assert source.completions == ["setup.py", "src/"]
    assert source.strict is True

    hidden = directory_entries(tmp_path, prefix="cd ", include_hidden=True)
    assert hidden.completions == ["cd .hidden", "cd setup.py", "cd src/"]


def test_directory_entries_missing_directory(tmp_path):
    assert directory_entries(tmp_path / "missing").completions == []


def test_context_sensitive_directory_source(tmp_path):
    registry = CompletionRegistry()
    (tmp_path / "alpha").mkdir()
    registry.register(when(r"^cd\s", directory_entries(tmp_path, prefix="cd ")), "cd")
    assert registry.complete("cd ").completions == ["cd alpha/"]

    (tmp_path / "beta").mkdir()
    registry.register(
        when(r"^cd\s", directory_entries(tmp_path, prefix="cd ")), "cd", replace=True
    )
    match = registry.complete("cd ")
    assert match.completions == ["cd alpha/", "cd beta/"]
    assert match.result == "cd "
