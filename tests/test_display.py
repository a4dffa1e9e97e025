import io

from rich.console import Console

from tabfill.display import show_completions, viewport_from_console
from tabfill.formatter import Viewport


def make_console(width=20, height=5):
    return Console(width=width, height=height, record=True, color_system=None)


def test_viewport_from_console():
    assert viewport_from_console(make_console(30, 7)) == Viewport(columns=30, rows=7)


def test_show_completions_uses_console_size():
    console = make_console(width=10, height=2)
    show_completions(["aa", "bb", "cc", "dd", "ee"], console=console)
    output = console.export_text()
    assert output.splitlines() == ["aa  bb", "...and 3 more"]


def test_show_completions_explicit_viewport():
    console = make_console()
    show_completions(["aa", "bb", "cc"], console=console, viewport=Viewport(10, 5))
    assert console.export_text().splitlines() == ["aa  bb", "cc"]


def test_show_completions_empty():
    console = make_console()
    show_completions([], console=console)
    assert console.export_text() == ""


def test_show_completions_on_plain_console():
    console = Console(file=io.StringIO(), width=40, height=5)
    show_completions(["alpha", "beta"], console=console)
    assert "alpha" in console.file.getvalue()
