# Tabfill Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `TabfillCompleter`, a Prompt Toolkit completer backed by a
`CompletionRegistry`.

The text before the cursor is matched as a whole against the registry. The
resulting `MatchResult` is turned into `Completion` objects so that:
- a single match is inserted fully
- a longer shared prefix (the autofill) is offered first, followed by every match
- otherwise every match is listed

Example:
    registry = CompletionRegistry()
    registry.register(["help", "history", "halt"])
    session = PromptSession(completer=TabfillCompleter(registry))
"""
from __future__ import annotations

from typing import Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from tabfill.engine import MatchResult
from tabfill.registry import CompletionRegistry


class TabfillCompleter(Completer):
    """
    Prompt Toolkit completer for input matched against a `CompletionRegistry`.

    Args:
        registry (CompletionRegistry): Sources to complete from. The registry
            can keep changing after the completer is created.
        quote (bool): Wrap completions containing whitespace in double quotes.
    """

    def __init__(self, registry: CompletionRegistry, quote: bool = False):
        self.registry = registry
        self.quote = quote

    def get_completions(
        self, document: Document, complete_event: CompleteEvent | None
    ) -> Iterable[Completion]:
        """
        Yield completions for the text before the cursor.

        Args:
            document (Document): The current Prompt Toolkit document.
            complete_event: The triggering event; not used.

        Yields:
            Completion: Completions replacing the text before the cursor.
        """
        text = document.text_before_cursor
        yield from self._yield_lcp_completions(self.registry.complete(text), text)

    def _ensure_quote(self, text: str) -> str:
        if self.quote and (" " in text or "\t" in text):
            return f'"{text}"'
        return text

    def _yield_lcp_completions(
        self, match: MatchResult, stub: str
    ) -> Iterable[Completion]:
        """
        Yield completions for `stub` using the match's autofill.

        Args:
            match (MatchResult): Result of matching `stub`.
            stub (str): The text being replaced.

        Yields:
            Completion: Completion objects for the Prompt Toolkit menu.
        """
        if not match:
            return

        start_position = -len(stub)
        if match.is_unique:
            only = match.completions[0]
            yield Completion(
                self._ensure_quote(only), start_position=start_position, display=only
            )
            return

        if match.result and len(match.result) > len(stub):
            yield Completion(
                match.result,
                start_position=start_position,
                display=match.result,
                style="class:completion-autofill",
            )
        for completion in match.completions:
            yield Completion(
                self._ensure_quote(completion),
                start_position=start_position,
                display=completion,
            )
