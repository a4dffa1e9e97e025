# Tabfill Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""normalize.py"""


def comparing_value(value: str, strict: bool) -> str:
    """Return the form of `value` used for prefix comparison."""
    return value if strict else value.lower()


def starts_with(candidate: str, stub: str, strict: bool) -> bool:
    """Check whether `candidate` begins with an already-normalized `stub`."""
    return comparing_value(candidate, strict).startswith(stub)
