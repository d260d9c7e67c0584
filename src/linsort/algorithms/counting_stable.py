"""
Stable counting sort.

Time O(n + k), space O(n + k) where k = max - min + 1.

Equal keys keep their input order: the input is walked right to left and
each element takes the highest free slot for its key, so earlier
occurrences end up in lower slots.

Config:
    max_range : int | None   refuse (RangeTooLargeError) when k exceeds it
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ._common import KeyFn, check_span, key_bounds, keys_of, parse_config, positive_int_or_none

NAME = "counting_stable"
DISPLAY_NAME = "Counting Sort (Stable)"
STABLE = True

_DEFAULTS: Dict[str, Any] = {"max_range": None}

logger = logging.getLogger(__name__)

__all__ = ["NAME", "DISPLAY_NAME", "STABLE", "sort", "sort_inplace"]


def sort_inplace(
    a: List[Any], *, config: Optional[Dict[str, Any]] = None, key: Optional[KeyFn] = None
) -> None:
    """Sort `a` in place by `key` (identity if None), preserving tie order."""
    cfg = parse_config(NAME, config, _DEFAULTS)
    max_range = positive_int_or_none(NAME, "max_range", cfg["max_range"])

    n = len(a)
    if n == 0:
        return

    keys = keys_of(a, key)
    lo, hi = key_bounds(keys)
    span = hi - lo + 1
    check_span(NAME, span, max_range)
    logger.debug("%s: n=%d range=%d", NAME, n, span)

    count = [0] * span
    for k in keys:
        count[k - lo] += 1

    # cumulative: count[i] = number of keys <= lo + i
    for i in range(1, span):
        count[i] += count[i - 1]

    output: List[Any] = [None] * n
    for i in range(n - 1, -1, -1):
        slot = keys[i] - lo
        count[slot] -= 1
        output[count[slot]] = a[i]

    a[:] = output


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    """Return a sorted copy of `a`; the input is not mutated."""
    out = list(a)
    sort_inplace(out, config=config)
    return out
