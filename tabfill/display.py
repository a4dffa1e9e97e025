# Tabfill Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich-based display of completion pages.

`format_page()` produces plain CRLF text for raw terminal writes; this module
renders the same layout through a `rich.console.Console`, using the console's
size as the viewport.
"""
from __future__ import annotations

from typing import Sequence

from rich.console import Console

from tabfill.console import console as default_console
from tabfill.formatter import Viewport, paginate, render_row
from tabfill.themes import OneColors


def viewport_from_console(console: Console | None = None) -> Viewport:
    """Build a `Viewport` from the console size, falling back to 80x10."""
    console = console or default_console
    try:
        width, height = console.size
    except (OSError, ValueError):
        return Viewport()
    return Viewport(columns=width, rows=height)


def show_completions(
    candidates: Sequence[str],
    console: Console | None = None,
    viewport: Viewport | None = None,
) -> None:
    """Print `candidates` as a grid sized to `viewport` or to the console."""
    console = console or default_console
    page = paginate(candidates, viewport or viewport_from_console(console))
    for row in page.rows:
        console.print(
            render_row(row, page.column_width),
            style=OneColors.WHITE,
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
    if page.hidden:
        console.print(
            page.more_marker(),
            style=f"italic {OneColors.COMMENT_GREY}",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
