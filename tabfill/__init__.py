"""
Tabfill Completion Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .engine import MatchResult, complete
from .formatter import Viewport, format_page
from .prefix import longest_common_prefix
from .registry import CompletionRegistry
from .source import CompletionSource

logger = logging.getLogger("tabfill")


__all__ = [
    "CompletionRegistry",
    "CompletionSource",
    "MatchResult",
    "Viewport",
    "complete",
    "format_page",
    "longest_common_prefix",
]
