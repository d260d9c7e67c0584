"""
Unstable counting sort.

Counts occurrences, then rewrites the list by emitting each value
`count` times in increasing order. No cumulative table and no output
buffer, so extra space is O(k) only. Values are rebuilt from their
counts, which is why this variant sorts bare integers and takes no key.

Config:
    max_range : int | None
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ._common import check_span, key_bounds, parse_config, positive_int_or_none

NAME = "counting_unstable"
DISPLAY_NAME = "Counting Sort (Non-Stable)"
STABLE = False

_DEFAULTS: Dict[str, Any] = {"max_range": None}

logger = logging.getLogger(__name__)

__all__ = ["NAME", "DISPLAY_NAME", "STABLE", "sort", "sort_inplace"]


def sort_inplace(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> None:
    cfg = parse_config(NAME, config, _DEFAULTS)
    max_range = positive_int_or_none(NAME, "max_range", cfg["max_range"])

    if not a:
        return

    lo, hi = key_bounds(a)
    span = hi - lo + 1
    check_span(NAME, span, max_range)
    logger.debug("%s: n=%d range=%d", NAME, len(a), span)

    count = [0] * span
    for v in a:
        count[v - lo] += 1

    pos = 0
    for i in range(span):
        c = count[i]
        if c:
            a[pos:pos + c] = [lo + i] * c
            pos += c


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    out = list(a)
    sort_inplace(out, config=config)
    return out
