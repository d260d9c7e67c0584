"""
Bucket sort with per-bucket insertion sort.

Average O(n + k), worst case O(n^2): when most keys map to a few buckets
(skewed or low-range input) the insertion sorts dominate. Skew is neither
detected nor rebalanced.

Bucket assignment is the proportional formula

    index = min((key - min) * (bucket_count - 1) // range, bucket_count - 1)

with range = max - min + 1 and bucket_count = max(1, n) unless configured.
Stability is not part of the contract.

Config:
    bucket_count : int | None   override the max(1, n) heuristic
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from ._common import KeyFn, key_bounds, keys_of, parse_config, positive_int_or_none

NAME = "bucket"
DISPLAY_NAME = "Bucket Sort"
STABLE = False

_DEFAULTS: Dict[str, Any] = {"bucket_count": None}

logger = logging.getLogger(__name__)

__all__ = ["NAME", "DISPLAY_NAME", "STABLE", "bucket_index", "sort", "sort_inplace"]


def bucket_index(k: int, lo: int, span: int, bucket_count: int) -> int:
    """Bucket for key `k` given min `lo`, range `span` and `bucket_count` buckets."""
    idx = ((k - lo) * (bucket_count - 1)) // span
    return min(idx, bucket_count - 1)


def _insertion_sort(bucket: List[Tuple[int, Any]]) -> None:
    for i in range(1, len(bucket)):
        cur = bucket[i]
        j = i - 1
        while j >= 0 and bucket[j][0] > cur[0]:
            bucket[j + 1] = bucket[j]
            j -= 1
        bucket[j + 1] = cur


def sort_inplace(
    a: List[Any], *, config: Optional[Dict[str, Any]] = None, key: Optional[KeyFn] = None
) -> None:
    cfg = parse_config(NAME, config, _DEFAULTS)
    configured = positive_int_or_none(NAME, "bucket_count", cfg["bucket_count"])

    n = len(a)
    if n == 0:
        return

    keys = keys_of(a, key)
    lo, hi = key_bounds(keys)
    if lo == hi:
        return

    bucket_count = configured if configured is not None else max(1, n)
    span = hi - lo + 1
    logger.debug("%s: n=%d buckets=%d range=%d", NAME, n, bucket_count, span)

    buckets: List[List[Tuple[int, Any]]] = [[] for _ in range(bucket_count)]
    for item, k in zip(a, keys):
        buckets[bucket_index(k, lo, span, bucket_count)].append((k, item))

    pos = 0
    for b in buckets:
        _insertion_sort(b)
        for _, item in b:
            a[pos] = item
            pos += 1


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    out = list(a)
    sort_inplace(out, config=config)
    return out
