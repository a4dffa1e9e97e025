# Tabfill Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Shorthand constructors for the common shapes of `CompletionSource`.

Example:
    registry.register(words(["help", "history"]), "builtins")
    registry.register(after("git ", ["git commit", "git checkout"]), "git")
    registry.register(unless(["cd ", "ls "], ["cd", "ls"]), "nav")
    registry.register(when(r"^cd\\s", directory_entries(".", prefix="cd ")), "cd", True)
"""
from __future__ import annotations

import re
from pathlib import Path

from tabfill.rules import PrefixRule
from tabfill.source import CompletionSource


def words(completions: list[str], strict: bool = False) -> CompletionSource:
    """Unconditional source."""
    return CompletionSource(completions=completions, strict=strict)


def after(prefix: str, completions: list[str], strict: bool = False) -> CompletionSource:
    """Source offered while `prefix` still starts with the input."""
    return CompletionSource(
        completions=completions, prefix=PrefixRule.from_literal(prefix), strict=strict
    )


def unless(
    prefixes: list[str], completions: list[str], strict: bool = False
) -> CompletionSource:
    """Source offered only while none of `prefixes` start with the input."""
    return CompletionSource(
        completions=completions, prefix=PrefixRule.from_list(prefixes), strict=strict
    )


def when(
    pattern: str | re.Pattern[str],
    completions: list[str] | CompletionSource,
    strict: bool = False,
) -> CompletionSource:
    """
    Source offered when `pattern` matches the raw input.

    `completions` may be another source, in which case its candidates and
    strictness are reused.
    """
    if isinstance(completions, CompletionSource):
        strict = completions.strict
        completions = completions.completions
    return CompletionSource(
        completions=completions, prefix=PrefixRule.from_pattern(pattern), strict=strict
    )


def directory_entries(
    path: str | Path,
    *,
    prefix: str = "",
    include_hidden: bool = False,
    strict: bool = True,
) -> CompletionSource:
    """
    Unconditional source listing the entries of a directory.

    Entries are sorted by name; directories end with `/`. Each candidate is
    prefixed with `prefix`, so `prefix="cd "` yields `cd src/`. A missing or
    unreadable directory gives an empty source.

    Args:
        path (str | Path): Directory to list.
        prefix (str): Text put in front of every entry.
        include_hidden (bool): Include dot-files.
        strict (bool): Case-sensitive matching, the usual behaviour for paths.
    """
    directory = Path(path)
    completions: list[str] = []
    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError:
        entries = []
    for entry in entries:
        if entry.name.startswith(".") and not include_hidden:
            continue
        name = f"{entry.name}/" if entry.is_dir() else entry.name
        completions.append(f"{prefix}{name}")
    return CompletionSource(completions=completions, strict=strict)
