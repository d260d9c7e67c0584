"""
LSD radix sort built from stable digit counting passes.

Time O(d * (n + b)), space O(n + b), where b is the base and d the number
of base-b digits in the largest key. Stable overall because every pass is
stable: after the pass with weight b**k the list is ordered by
key mod b**(k+1).

Keys must be non-negative. A negative key raises NegativeValueError before
any pass runs, leaving the list untouched.

Config:
    base : int   digit base, >= 2 (default 10). Larger bases mean fewer
                 passes but a larger per-pass table.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional

from linsort.errors import ConfigError, NegativeValueError

from ._common import KeyFn, keys_of, parse_config

NAME = "radix_lsd"
DISPLAY_NAME = "Radix Sort (LSD)"
STABLE = True
DEFAULT_BASE = 10

_DEFAULTS: Dict[str, Any] = {"base": DEFAULT_BASE}

logger = logging.getLogger(__name__)

__all__ = [
    "NAME",
    "DISPLAY_NAME",
    "STABLE",
    "DEFAULT_BASE",
    "digit_counting_pass",
    "iter_passes",
    "sort",
    "sort_inplace",
]


def _check_base(base: Any) -> int:
    if isinstance(base, bool) or not isinstance(base, int) or base < 2:
        raise ConfigError(f"{NAME}: base must be an integer >= 2; got {base!r}")
    return base


def _check_weight(weight: Any, base: int) -> int:
    if isinstance(weight, bool) or not isinstance(weight, int) or weight < 1:
        raise ValueError(f"digit weight must be a positive power of {base}; got {weight!r}")
    w = weight
    while w % base == 0:
        w //= base
    if w != 1:
        raise ValueError(f"digit weight must be a positive power of {base}; got {weight}")
    return weight


def _first_negative(keys: List[int]) -> Optional[int]:
    for i, k in enumerate(keys):
        if k < 0:
            return i
    return None


def digit_counting_pass(
    a: List[Any], weight: int, *, base: int = DEFAULT_BASE, key: Optional[KeyFn] = None
) -> None:
    """
    Stably reorder `a` in place by the digit (key // weight) % base.

    `weight` must be a positive power of `base` (1 included).
    """
    base = _check_base(base)
    _check_weight(weight, base)
    if not a:
        return

    keys = keys_of(a, key)
    bad = _first_negative(keys)
    if bad is not None:
        raise NegativeValueError(NAME, bad, keys[bad])
    _pass(a, keys, weight, base)


def _pass(a: List[Any], keys: List[int], weight: int, base: int) -> None:
    n = len(a)
    digits = [(k // weight) % base for k in keys]

    count = [0] * base
    for d in digits:
        count[d] += 1
    for i in range(1, base):
        count[i] += count[i - 1]

    # right to left keeps equal digits in input order
    output: List[Any] = [None] * n
    for i in range(n - 1, -1, -1):
        d = digits[i]
        count[d] -= 1
        output[count[d]] = a[i]

    a[:] = output


def iter_passes(
    a: List[Any], *, base: int = DEFAULT_BASE, key: Optional[KeyFn] = None
) -> Iterator[int]:
    """
    Run the LSD passes over `a` in place, yielding the weight after each pass.

    Lets callers look at the intermediate orderings:

        for w in iter_passes(xs):
            print(w, xs)
    """
    base = _check_base(base)
    if not a:
        return

    keys = keys_of(a, key)
    bad = _first_negative(keys)
    if bad is not None:
        raise NegativeValueError(NAME, bad, keys[bad])

    max_key = max(keys)
    weight = 1
    while max_key // weight > 0:
        # keys follow the elements, so recompute from the reordered list
        _pass(a, keys_of(a, key), weight, base)
        logger.debug("%s: pass weight=%d base=%d n=%d", NAME, weight, base, len(a))
        yield weight
        weight *= base


def sort_inplace(
    a: List[Any], *, config: Optional[Dict[str, Any]] = None, key: Optional[KeyFn] = None
) -> None:
    """Sort non-negative keys in place, stably."""
    cfg = parse_config(NAME, config, _DEFAULTS)
    for _ in iter_passes(a, base=cfg["base"], key=key):
        pass


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    out = list(a)
    sort_inplace(out, config=config)
    return out
