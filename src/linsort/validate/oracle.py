"""
Reference results for the linear-time sorts.

Python's `sorted()` (Timsort) is the ground truth: it is deterministic and
stable, so it also gives the expected order of tagged records for the
stable algorithms.

Public API:
    oracle_sort(a: list[int]) -> list[int]
    oracle_sort_by(items: list[T], key) -> list[T]
    equals_oracle(a: list[int], out: list[int]) -> bool

The oracle never mutates its input.
"""

from __future__ import annotations

from typing import Any, Callable, List, Sequence, TypeVar

T = TypeVar("T")

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "oracle_sort_by", "equals_oracle"]


def oracle_sort(a: Sequence[int]) -> List[int]:
    """Return a new list with the values of `a` in non-decreasing order."""
    return sorted(a)


def oracle_sort_by(items: Sequence[T], key: Callable[[T], Any]) -> List[T]:
    """
    Stable reference ordering of `items` by `key`.

    A stable algorithm sorting the same records by the same key must produce
    exactly this list.
    """
    return sorted(items, key=key)


def equals_oracle(a: Sequence[int], out: Sequence[int]) -> bool:
    """True iff `out` equals the oracle's ordering of `a`."""
    return list(out) == oracle_sort(a)
