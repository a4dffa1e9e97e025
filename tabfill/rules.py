# Tabfill Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Prefix rules decide whether a completion source applies to the current input.

A rule is one of four closed variants, tagged by `RuleKind`:

- UNCONDITIONAL: always applies; an empty input lists every candidate.
- LITERAL: applies while the literal still starts with the typed input.
- LIST: applies only while *none* of the literals start with the typed input,
  so a source can step aside once the user is typing one of them.
- PATTERN: applies when the regular expression matches the raw input.

`coerce_rule()` converts the loose values accepted at registration time
(`None`, `""`, a string, a list of strings, a compiled pattern) into a
`PrefixRule`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from tabfill.exceptions import InvalidSourceError


class RuleKind(Enum):
    """Variants of a `PrefixRule`."""

    UNCONDITIONAL = "unconditional"
    LITERAL = "literal"
    LIST = "list"
    PATTERN = "pattern"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PrefixRule:
    """
    A tagged prefix rule.

    Only the field matching `kind` is meaningful: `literal` for LITERAL,
    `literals` for LIST, `pattern` for PATTERN.
    """

    kind: RuleKind = RuleKind.UNCONDITIONAL
    literal: str = ""
    literals: tuple[str, ...] = field(default_factory=tuple)
    pattern: re.Pattern[str] | None = None

    @classmethod
    def unconditional(cls) -> PrefixRule:
        return cls()

    @classmethod
    def from_literal(cls, literal: str) -> PrefixRule:
        if not literal:
            return cls()
        return cls(kind=RuleKind.LITERAL, literal=literal)

    @classmethod
    def from_list(cls, literals: list[str] | tuple[str, ...]) -> PrefixRule:
        return cls(kind=RuleKind.LIST, literals=tuple(literals))

    @classmethod
    def from_pattern(cls, pattern: str | re.Pattern[str]) -> PrefixRule:
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        return cls(kind=RuleKind.PATTERN, pattern=pattern)


def coerce_rule(prefix: Any) -> PrefixRule:
    """
    Build a `PrefixRule` from a registration value.

    `None` and `""` are unconditional. An empty list is a LIST rule with no
    literals, which always applies.

    Raises:
        InvalidSourceError: If the value is not a supported prefix type.
    """
    if isinstance(prefix, PrefixRule):
        return prefix
    if prefix is None:
        return PrefixRule.unconditional()
    if isinstance(prefix, str):
        return PrefixRule.from_literal(prefix)
    if isinstance(prefix, re.Pattern):
        return PrefixRule.from_pattern(prefix)
    if isinstance(prefix, (list, tuple)):
        for literal in prefix:
            if not isinstance(literal, str):
                raise InvalidSourceError(
                    f"Prefix list entries must be strings, got {type(literal).__name__}."
                )
        return PrefixRule.from_list(prefix)
    raise InvalidSourceError(
        f"Unsupported prefix type '{type(prefix).__name__}'. "
        "Expected a string, a list of strings or a compiled pattern."
    )
