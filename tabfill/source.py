# Tabfill Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CompletionSource`, one named set of completions and the rule that
decides when they apply.

Sources are usually created through `CompletionRegistry.register()`, which
accepts a bare list of candidates, a mapping, or a `CompletionSource`. All of
them pass through `coerce_source()`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from tabfill.exceptions import InvalidSourceError
from tabfill.rules import PrefixRule, coerce_rule


@dataclass
class CompletionSource:
    """
    A set of completions gated by a prefix rule.

    Attributes:
        completions (list[str]): Candidate strings, in registration order.
        prefix: `None`/`""`, a string, a list of strings, a compiled pattern or a
            `PrefixRule`. Normalized into `rule`.
        strict (bool): Case-sensitive matching when True.
    """

    completions: list[str] = field(default_factory=list)
    prefix: Any = None
    strict: bool = False
    rule: PrefixRule = field(init=False, repr=False)

    def __post_init__(self):
        self.rule = coerce_rule(self.prefix)
        if isinstance(self.completions, str) or not isinstance(
            self.completions, Sequence
        ):
            raise InvalidSourceError(
                "completions must be a list of strings, "
                f"got {type(self.completions).__name__}."
            )
        for completion in self.completions:
            if not isinstance(completion, str):
                raise InvalidSourceError(
                    f"Completion {completion!r} must be a string, "
                    f"got {type(completion).__name__}."
                )
        self.completions = list(self.completions)
        if not isinstance(self.strict, bool):
            raise InvalidSourceError(
                f"strict must be a bool, got {type(self.strict).__name__}."
            )

    def with_completions(self, completions: list[str]) -> CompletionSource:
        """Return a copy of this source carrying different completions."""
        return CompletionSource(
            completions=completions, prefix=self.prefix, strict=self.strict
        )


def coerce_source(
    value: CompletionSource | Mapping[str, Any] | Sequence[str],
) -> CompletionSource:
    """
    Build a `CompletionSource` from any accepted registration value.

    A bare sequence of strings becomes an unconditional, non-strict source.
    A mapping may carry `prefix`, `strict` and `completions` keys.

    Raises:
        InvalidSourceError: If the value cannot describe a source.
    """
    if isinstance(value, CompletionSource):
        return value.with_completions(value.completions)
    if isinstance(value, Mapping):
        unknown = set(value) - {"prefix", "strict", "completions"}
        if unknown:
            raise InvalidSourceError(
                f"Unknown completion source field(s): {', '.join(sorted(unknown))}."
            )
        return CompletionSource(
            completions=value.get("completions", []),
            prefix=value.get("prefix"),
            strict=value.get("strict", False),
        )
    if isinstance(value, Sequence) and not isinstance(value, str):
        return CompletionSource(completions=list(value))
    raise InvalidSourceError(
        f"Cannot build a completion source from '{type(value).__name__}'. "
        "Expected a list of strings, a mapping or a CompletionSource."
    )
