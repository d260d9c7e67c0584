"""
Pigeonhole sort.

One hole per possible key in [min, max]. Elements are appended to their
hole in input order and holes are never reordered, so the sort is stable
without any reverse-iteration trick. Best when the range is small
compared to n.

Config:
    max_range : int | None
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ._common import KeyFn, check_span, key_bounds, keys_of, parse_config, positive_int_or_none

NAME = "pigeonhole"
DISPLAY_NAME = "Pigeonhole Sort"
STABLE = True

_DEFAULTS: Dict[str, Any] = {"max_range": None}

logger = logging.getLogger(__name__)

__all__ = ["NAME", "DISPLAY_NAME", "STABLE", "sort", "sort_inplace"]


def sort_inplace(
    a: List[Any], *, config: Optional[Dict[str, Any]] = None, key: Optional[KeyFn] = None
) -> None:
    cfg = parse_config(NAME, config, _DEFAULTS)
    max_range = positive_int_or_none(NAME, "max_range", cfg["max_range"])

    if not a:
        return

    keys = keys_of(a, key)
    lo, hi = key_bounds(keys)
    span = hi - lo + 1
    check_span(NAME, span, max_range)
    logger.debug("%s: n=%d holes=%d", NAME, len(a), span)

    holes: List[List[Any]] = [[] for _ in range(span)]
    for item, k in zip(a, keys):
        holes[k - lo].append(item)

    pos = 0
    for hole in holes:
        for item in hole:
            a[pos] = item
            pos += 1


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    out = list(a)
    sort_inplace(out, config=config)
    return out
