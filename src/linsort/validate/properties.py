"""
Property checks for sort outputs.

Used by the tests and by the timing harness (`verify=True`).

Public API:
    is_nondecreasing(xs) -> bool
    first_nondecreasing_violation_index(xs) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict[int, int]
    tag_with_index(a) -> list[tuple[int, int]]
    first_stability_violation_index(tagged_out) -> int | None
    is_stable(tagged_out) -> bool
    assert_no_mutation(before, after) -> None

Stability cannot be seen on bare integers, so the stability helpers work on
(value, original_index) pairs produced by `tag_with_index`. In a sorted
output equal values are contiguous, so checking adjacent pairs is enough.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

Tagged = Tuple[int, int]

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "tag_with_index",
    "first_stability_violation_index",
    "is_stable",
    "assert_no_mutation",
]


def is_nondecreasing(xs: Sequence[int]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[int]) -> Optional[int]:
    """First i with xs[i] > xs[i+1], or None."""
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_permutation(a: Sequence[int], b: Sequence[int]) -> bool:
    """True iff `a` and `b` hold the same multiset of values."""
    return len(a) == len(b) and Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[int], b: Sequence[int]) -> Dict[int, int]:
    """
    value -> count_a - count_b, for values whose multiplicities differ.

    Empty dict means the multisets match.
    """
    ca, cb = Counter(a), Counter(b)
    diff: Dict[int, int] = {}
    for k in ca.keys() | cb.keys():
        d = ca[k] - cb[k]
        if d:
            diff[k] = d
    return diff


def tag_with_index(a: Sequence[int]) -> List[Tagged]:
    return [(v, i) for i, v in enumerate(a)]


def first_stability_violation_index(tagged_out: Sequence[Tagged]) -> Optional[int]:
    """
    First i where tagged_out[i] and tagged_out[i+1] share a value but their
    original indices are out of order, or None.
    """
    for i in range(len(tagged_out) - 1):
        (v1, t1), (v2, t2) = tagged_out[i], tagged_out[i + 1]
        if v1 == v2 and t1 > t2:
            return i
    return None


def is_stable(tagged_out: Sequence[Tagged]) -> bool:
    return first_stability_violation_index(tagged_out) is None


def assert_no_mutation(before: Sequence[int], after: Sequence[int]) -> None:
    """Raise AssertionError naming the first difference if the inputs differ."""
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x}, after={y}")
