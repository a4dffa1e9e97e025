# Tabfill Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `CompletionRegistry`, the keyed store of completion sources.

Sources are registered under a string key (`""` for the anonymous source).
Registering again under the same key merges by default: candidates of the
previous source that the new list does not mention are kept, ahead of the new
ones. Passing `replace=True` overwrites the previous source instead.

Example:
    registry = CompletionRegistry()
    registry.register(["help", "history", "halt"])
    registry.register({"prefix": "git ", "completions": ["git commit"]}, "git")
    registry.complete("h").completions  → ["halt", "help", "history"]
"""
from __future__ import annotations

from typing import Any, Iterator, Mapping, Sequence

from tabfill.engine import MatchResult, complete
from tabfill.logger import logger
from tabfill.source import CompletionSource, coerce_source


class CompletionRegistry:
    """
    Mutable mapping of key to `CompletionSource`.

    The registry is not thread-safe; hosts calling `register()` and
    `complete()` from several threads must serialize access themselves.
    """

    def __init__(self) -> None:
        self._sources: dict[str, CompletionSource] = {}

    def register(
        self,
        source: CompletionSource | Mapping[str, Any] | Sequence[str],
        key: str | bool = "",
        replace: bool = False,
    ) -> None:
        """
        Register a completion source under `key`.

        Args:
            source: A list of candidates (unconditional, non-strict), a mapping
                with `prefix`, `strict` and `completions`, or a `CompletionSource`.
            key (str | bool): Registry key. A bool is read as `replace` and the
                key defaults to `""`.
            replace (bool): Overwrite an existing source instead of merging.

        Raises:
            InvalidSourceError: If `source` cannot describe a completion source.
        """
        if isinstance(key, bool):
            replace = key
            key = ""

        new_source = coerce_source(source)
        existing = self._sources.get(key)
        if existing is not None and not replace:
            kept = [
                completion
                for completion in existing.completions
                if completion not in new_source.completions
            ]
            new_source.completions[:0] = kept
            logger.debug(
                "[Registry] Merged source '%s': kept %d of %d previous completions.",
                key,
                len(kept),
                len(existing.completions),
            )
        elif existing is not None:
            logger.debug("[Registry] Replaced source '%s'.", key)
        else:
            logger.debug(
                "[Registry] Registered source '%s' (%s, strict=%s).",
                key,
                new_source.rule.kind,
                new_source.strict,
            )
        self._sources[key] = new_source

    def complete(self, value: str) -> MatchResult:
        """Match `value` against every registered source."""
        return complete(self, value)

    def get(self, key: str = "") -> CompletionSource | None:
        return self._sources.get(key)

    def keys(self) -> list[str]:
        return list(self._sources)

    def clear(self) -> None:
        self._sources.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._sources

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self) -> Iterator[CompletionSource]:
        return iter(self._sources.values())

    def __repr__(self) -> str:
        return f"CompletionRegistry(keys={self.keys()!r})"
