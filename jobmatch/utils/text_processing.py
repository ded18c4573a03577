"""
Text processing utilities for formatting and display.
"""

from typing import Iterable


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        "short"
        >>> truncate_display("this is a very long string", 10)
        "this is..."
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def format_keyword_list(keywords: Iterable[str], max_items: int = 20) -> str:
    """
    Render keywords as a sorted, comma-separated list for console display.

    Keywords are quoted with repr() so that tokens carrying punctuation or
    odd whitespace stay visible. Lists longer than max_items are cut with a
    "(+N more)" tail.

    Example:
        >>> format_keyword_list({"cloud", "Python"})
        "'Python', 'cloud'"
        >>> format_keyword_list([])
        '(none)'
    """
    items = sorted(keywords)
    if not items:
        return "(none)"

    shown = ", ".join(repr(k) for k in items[:max_items])
    if len(items) > max_items:
        shown += f" (+{len(items) - max_items} more)"
    return shown
