# Tabfill Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Match engine: turns the current input into a `MatchResult`.

Every source decides on its own whether it applies to the input (see
`tabfill.rules`), then contributes the candidates that start with the input.
Contributions are merged by exact string equality, sorted by code point and
reduced to an autofill with `longest_common_prefix()`.

Matching is total: any string, including `""`, produces a result.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from tabfill.logger import logger
from tabfill.normalize import comparing_value, starts_with
from tabfill.prefix import longest_common_prefix
from tabfill.rules import RuleKind
from tabfill.source import CompletionSource


@dataclass
class MatchResult:
    """
    Sorted completions for an input and the text that can be autofilled.

    Attributes:
        result (str | None): Longest common prefix of `completions`, or None when
            nothing matched.
        completions (list[str]): Matching candidates, deduplicated and sorted.
    """

    result: str | None = None
    completions: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.completions)

    def __len__(self) -> int:
        return len(self.completions)

    @property
    def is_unique(self) -> bool:
        return len(self.completions) == 1


def source_applies(source: CompletionSource, value: str) -> bool:
    """Check whether the source's prefix rule admits `value`."""
    stub = comparing_value(value, source.strict)
    rule = source.rule
    match rule.kind:
        case RuleKind.UNCONDITIONAL:
            return True
        case RuleKind.LIST:
            return not any(
                starts_with(literal, stub, source.strict) for literal in rule.literals
            )
        case RuleKind.LITERAL:
            return starts_with(rule.literal, stub, source.strict)
        case RuleKind.PATTERN:
            return rule.pattern is not None and rule.pattern.search(value) is not None
        case _:
            return False


def match_source(source: CompletionSource, value: str) -> list[str]:
    """
    Return the candidates `source` contributes for `value`.

    An unconditional source lists every candidate while the input is blank.
    Otherwise only candidates starting with the input are returned, and only if
    the source's rule applies.
    """
    if not source_applies(source, value):
        return []
    stub = comparing_value(value, source.strict)
    if source.rule.kind is RuleKind.UNCONDITIONAL and not stub.strip():
        return list(source.completions)
    return [
        completion
        for completion in source.completions
        if starts_with(completion, stub, source.strict)
    ]


def complete(sources: Iterable[CompletionSource], value: str) -> MatchResult:
    """
    Match `value` against every source and merge the results.

    Args:
        sources (Iterable[CompletionSource]): Sources to consult, such as a
            `CompletionRegistry`.
        value (str): The text typed so far.

    Returns:
        MatchResult: Sorted unique completions and their autofill.
    """
    matched: set[str] = set()
    for source in sources:
        matched.update(match_source(source, value))

    if not matched:
        logger.debug("[Engine] No completions for %r.", value)
        return MatchResult()

    completions = sorted(matched)
    logger.debug("[Engine] %d completion(s) for %r.", len(completions), value)
    return MatchResult(
        result=longest_common_prefix(completions), completions=completions
    )
