# Tabfill Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Tabfill output."""
from rich.console import Console

from tabfill.themes import get_theme

console = Console(color_system="truecolor", theme=get_theme())
