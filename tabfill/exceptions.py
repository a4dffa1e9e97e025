# Tabfill Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in Tabfill.

Matching, prefix reduction and page formatting never raise. Exceptions are
reserved for the edges where callers hand Tabfill malformed data: registering
a source and loading a configuration file.

Exception Hierarchy:
- TabfillError
    ├── InvalidSourceError
    └── ConfigError
"""


class TabfillError(Exception):
    """Base exception for Tabfill."""


class InvalidSourceError(TabfillError, TypeError):
    """Exception raised when a completion source cannot be built from the given value."""


class ConfigError(TabfillError, ValueError):
    """Exception raised when a configuration file cannot be loaded or validated."""
