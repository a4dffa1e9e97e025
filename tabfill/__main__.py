"""
Tabfill Completion Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText

from tabfill.builders import directory_entries, words
from tabfill.completer import TabfillCompleter
from tabfill.config import find_config, loader
from tabfill.console import console
from tabfill.display import show_completions, viewport_from_console
from tabfill.exceptions import ConfigError
from tabfill.formatter import Viewport
from tabfill.registry import CompletionRegistry
from tabfill.themes import OneColors
from tabfill.utils import setup_logging
from tabfill.version import __version__

BUILTINS = ["exit", "help", "history"]


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="tabfill",
        description="Tab completion from registered sources.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-c", "--config", type=Path, help="YAML or TOML file listing completion sources."
    )
    parser.add_argument("--columns", type=int, help="Viewport width for listings.")
    parser.add_argument("--rows", type=int, help="Viewport height for listings.")
    parser.add_argument(
        "--log-mode", choices=["cli", "json"], help="Console logging format."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    subparsers = parser.add_subparsers(dest="command")
    complete_parser = subparsers.add_parser(
        "complete", help="Print the autofill and completions for TEXT."
    )
    complete_parser.add_argument("text", nargs="?", default="")
    subparsers.add_parser("shell", help="Interactive prompt with tab completion.")
    return parser


def build_registry(
    config_path: Path | None,
) -> tuple[CompletionRegistry, Viewport | None]:
    """Load sources from `config_path`, or fall back to built-ins and the cwd."""
    if config_path:
        config = loader(config_path)
        return config.to_registry(), config.viewport()
    registry = CompletionRegistry()
    registry.register(words(BUILTINS), "builtins")
    registry.register(directory_entries(Path.cwd()), "cwd")
    return registry, None


def resolve_viewport(args: Namespace, configured: Viewport | None) -> Viewport:
    base = configured or viewport_from_console(console)
    return Viewport(
        columns=args.columns if args.columns is not None else base.columns,
        rows=args.rows if args.rows is not None else base.rows,
    )


def run_complete(registry: CompletionRegistry, text: str, viewport: Viewport) -> int:
    match = registry.complete(text)
    if not match:
        console.print("No completions.", style="completion.more")
        return 1
    console.print(match.result, style="completion.autofill", markup=False)
    show_completions(match.completions, console=console, viewport=viewport)
    return 0


def run_shell(registry: CompletionRegistry) -> int:
    session: PromptSession = PromptSession(
        message=FormattedText([(OneColors.BLUE_b, "TABFILL > ")]),
        completer=TabfillCompleter(registry),
        complete_while_typing=False,
    )
    while True:
        try:
            text = session.prompt()
        except KeyboardInterrupt:
            continue
        except EOFError:
            return 0
        if text.strip() == "exit":
            return 0
        if text.strip() == "history":
            show_completions(list(session.history.get_strings()), console=console)
            continue
        if text.strip() == "help":
            show_completions(registry.complete("").completions, console=console)
            continue
        console.print(text, markup=False, highlight=False)


def main(argv: Sequence[str] | None = None) -> int:
    args = get_parser().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        log_filename=None,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    try:
        registry, configured = build_registry(args.config or find_config())
    except ConfigError as error:
        console.print(f"❌ {error}", style="error", markup=False)
        return 2

    if args.command == "complete":
        return run_complete(registry, args.text, resolve_viewport(args, configured))
    return run_shell(registry)


if __name__ == "__main__":
    sys.exit(main())
