"""Arithmetic on numbers stored as lists of decimal digits."""

from __future__ import annotations

from itertools import takewhile
from typing import List, Sequence


def plus_one(digits: Sequence[int]) -> List[int]:
    """Return the digits of the number one greater than ``digits``.

    The input is left unchanged.
    """
    nines = sum(1 for _ in takewhile(lambda d: d == 9, reversed(digits)))
    head = list(digits[: len(digits) - nines])
    if not head:
        return [1] + [0] * nines
    head[-1] += 1
    return head + [0] * nines