"""Run-length compression with runs capped at nine characters."""

from __future__ import annotations

from itertools import groupby

_MAX_RUN = 9


def compressed_string(word: str) -> str:
    """Compress ``word`` as count/character pairs, each count at most 9."""
    if not word:
        raise ValueError("cannot compress an empty string")

    parts = []
    for char, group in groupby(word):
        run = sum(1 for _ in group)
        full, rest = divmod(run, _MAX_RUN)
        parts.append(f"{_MAX_RUN}{char}" * full)
        if rest:
            parts.append(f"{rest}{char}")
    return "".join(parts)