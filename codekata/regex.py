"""Regular expression matching supporting '.' and '*'."""

from __future__ import annotations

from functools import lru_cache


def is_match(s: str, pattern: str) -> bool:
    """Return True if the whole of ``s`` matches ``pattern``.

    ``.`` matches any single character and ``*`` matches zero or more of
    the preceding element.
    """

    @lru_cache(maxsize=None)
    def matches(i: int, j: int) -> bool:
        if j >= len(pattern):
            return i >= len(s)

        first = i < len(s) and pattern[j] in (".", s[i])

        if j + 1 < len(pattern) and pattern[j + 1] == "*":
            return (first and matches(i + 1, j)) or matches(i, j + 2)

        return first and matches(i + 1, j + 1)

    return matches(0, 0)