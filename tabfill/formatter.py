# Tabfill Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Lays out a sorted completion list as a fixed-width grid sized to a viewport.

The layout is:
- column width = longest candidate + 2
- items per row = columns // column width (at least 1)
- when the list overflows `rows * items_per_row`, the last visible row is given
  up to a `...and N more` marker

Rows are joined with CRLF and the block is wrapped in a leading and trailing
CRLF so it can be written straight after the current input line.

Example:
    format_page(["aa", "bb", "cc"], Viewport(columns=10, rows=5))
    → "\\r\\naa  bb\\r\\ncc\\r\\n"
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from tabfill.utils import chunks

ROW_SEPARATOR = "\r\n"
COLUMN_GUTTER = 2
DEFAULT_COLUMNS = 80
DEFAULT_ROWS = 10


def _is_dimension(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class Viewport:
    """Visible terminal size. Non-positive dimensions fall back to 80x10."""

    columns: int = DEFAULT_COLUMNS
    rows: int = DEFAULT_ROWS

    def __post_init__(self):
        if not _is_dimension(self.columns):
            object.__setattr__(self, "columns", DEFAULT_COLUMNS)
        if not _is_dimension(self.rows):
            object.__setattr__(self, "rows", DEFAULT_ROWS)


@dataclass
class Page:
    """The visible part of a completion list, split into rows."""

    rows: list[list[str]] = field(default_factory=list)
    column_width: int = COLUMN_GUTTER
    hidden: int = 0

    @property
    def visible(self) -> int:
        return sum(len(row) for row in self.rows)

    def more_marker(self) -> str:
        return f"...and {self.hidden} more"


def paginate(candidates: Sequence[str], viewport: Viewport | None = None) -> Page:
    """Compute which candidates fit in `viewport` and how they wrap into rows."""
    viewport = viewport or Viewport()
    if not candidates:
        return Page()

    column_width = max(len(candidate) for candidate in candidates) + COLUMN_GUTTER
    items_per_row = max(1, viewport.columns // column_width)

    usable_rows = viewport.rows
    if len(candidates) > viewport.rows * items_per_row:
        usable_rows = viewport.rows - 1
    usable_rows = max(0, usable_rows)

    visible = list(candidates[: usable_rows * items_per_row])
    return Page(
        rows=list(chunks(visible, items_per_row)),
        column_width=column_width,
        hidden=len(candidates) - len(visible),
    )


def render_row(row: Sequence[str], column_width: int) -> str:
    """Pad every item but the last to `column_width` and join them."""
    if not row:
        return ""
    padded = [item.ljust(column_width) for item in row[:-1]]
    return "".join(padded) + row[-1]


def format_page(candidates: Sequence[str], viewport: Viewport | None = None) -> str:
    """
    Render a sorted completion list as CRLF-delimited text.

    Args:
        candidates (Sequence[str]): Sorted completions. Truncation always drops
            from the end.
        viewport (Viewport | None): Terminal size; defaults to 80x10.

    Returns:
        str: The page, wrapped in leading and trailing CRLF. An empty list
            yields only the wrapping separators.
    """
    page = paginate(candidates, viewport)
    lines = [render_row(row, page.column_width) for row in page.rows]
    if page.hidden:
        lines.append(page.more_marker())
    return ROW_SEPARATOR + ROW_SEPARATOR.join(lines) + ROW_SEPARATOR
