"""
Stability tests for the stable algorithms (counting_stable, radix_lsd, pigeonhole).

Values are tagged with their original index; a stable sort by value must
reproduce Python's (stable) sorted-by-key ordering of the tagged records
exactly. Counting_unstable and bucket carry no such guarantee and are only
checked for sortedness elsewhere.
"""

from __future__ import annotations

from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from linsort.algorithms import ALGORITHMS, STABLE_ALGORITHMS
from linsort.algorithms import counting_stable
from linsort.validate import first_stability_violation_index, is_stable, oracle_sort_by, tag_with_index


def _by_value(rec):
    return rec[0]


def test_stable_registry() -> None:
    assert STABLE_ALGORITHMS == ["counting_stable", "radix_lsd", "pigeonhole"]
    assert not ALGORITHMS["counting_unstable"].STABLE
    assert not ALGORITHMS["bucket"].STABLE


def test_counting_stable_tag_order() -> None:
    records = [(5, "a"), (3, "b"), (5, "c"), (3, "d")]
    counting_stable.sort_inplace(records, key=_by_value)
    assert [tag for _, tag in records] == ["b", "d", "a", "c"]


@pytest.mark.parametrize("name", STABLE_ALGORITHMS)
def test_tagged_pairs_fixed(name: str) -> None:
    records = [(5, "a"), (3, "b"), (5, "c"), (3, "d"), (0, "e"), (5, "f")]
    ALGORITHMS[name].sort_inplace(records, key=_by_value)
    assert [tag for _, tag in records] == ["e", "b", "d", "a", "c", "f"]


@pytest.mark.parametrize("name", STABLE_ALGORITHMS)
@settings(deadline=None, max_examples=60)
@given(a=st.lists(st.integers(min_value=0, max_value=30), min_size=0, max_size=300))
def test_property_stable(name: str, a: List[int]) -> None:
    tagged = tag_with_index(a)
    expected = oracle_sort_by(tagged, key=_by_value)

    ALGORITHMS[name].sort_inplace(tagged, key=_by_value)

    i = first_stability_violation_index(tagged)
    assert i is None, f"{name}: equal values out of input order at {i}: {tagged[i]} {tagged[i + 1]}"
    assert tagged == expected


@pytest.mark.parametrize("name", ["counting_stable", "pigeonhole"])
def test_stable_with_negative_keys(name: str) -> None:
    tagged = tag_with_index([-2, 4, -2, 0, 4, -2])
    ALGORITHMS[name].sort_inplace(tagged, key=_by_value)
    assert tagged == [(-2, 0), (-2, 2), (-2, 5), (0, 3), (4, 1), (4, 4)]
    assert is_stable(tagged)


def test_radix_stable_across_digit_passes() -> None:
    # equal values split over several digits must keep input order through every pass
    tagged = tag_with_index([121, 21, 121, 1, 21, 121])
    ALGORITHMS["radix_lsd"].sort_inplace(tagged, key=_by_value)
    assert tagged == [(1, 3), (21, 1), (21, 4), (121, 0), (121, 2), (121, 5)]


def test_bucket_sorts_records_by_key() -> None:
    records = [(9, "x"), (1, "y"), (5, "z"), (1, "w")]
    ALGORITHMS["bucket"].sort_inplace(records, key=_by_value)
    assert [v for v, _ in records] == [1, 1, 5, 9]
    assert sorted(tag for _, tag in records) == ["w", "x", "y", "z"]
