"""Character-safe string splitting for Notion's 2 000-character text limit.

Python ``str`` indexes by code point, so plain slicing never cuts a
multi-byte character or an emoji in half.
"""

from __future__ import annotations


def split_string(text: str, limit: int = 2000) -> list[str]:
    """Split *text* into chunks of at most *limit* characters.

    Returns ``[]`` for empty input; otherwise the chunks are non-empty and
    concatenate back to *text*.

    Raises
    ------
    ValueError
        If *limit* is less than 1.

    Examples
    --------
    >>> split_string("hello world", 5)
    ['hello', ' worl', 'd']
    >>> split_string("", 100)
    []
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")
    return [text[i : i + limit] for i in range(0, len(text), limit)]
