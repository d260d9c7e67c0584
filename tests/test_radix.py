"""
Radix sort: digit counting pass, pass count, configurable base, negative keys.
"""

from __future__ import annotations

from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from linsort.algorithms import radix_lsd
from linsort.errors import ConfigError, NegativeValueError


# ------------------------- digit counting pass ------------------------- #

def test_digit_pass_orders_by_units_digit() -> None:
    a = [170, 45, 75, 90, 802, 24, 2, 66]
    radix_lsd.digit_counting_pass(a, 1)
    assert a == [170, 90, 802, 2, 24, 45, 75, 66]


def test_digit_pass_orders_by_tens_digit() -> None:
    a = [170, 90, 802, 2, 24, 45, 75, 66]
    radix_lsd.digit_counting_pass(a, 10)
    assert a == [802, 2, 24, 45, 66, 170, 75, 90]


def test_digit_pass_empty_is_noop() -> None:
    a: List[int] = []
    radix_lsd.digit_counting_pass(a, 100)
    assert a == []


def test_digit_pass_other_base() -> None:
    a = [0x1F, 0x20, 0x0A, 0x3F]
    radix_lsd.digit_counting_pass(a, 16, base=16)
    assert a == [0x0A, 0x1F, 0x20, 0x3F]


@pytest.mark.parametrize("weight", [0, -10, 3, 20, 110, 1.0, True])
def test_digit_pass_rejects_bad_weight(weight) -> None:
    with pytest.raises(ValueError):
        radix_lsd.digit_counting_pass([1, 2, 3], weight)


def test_digit_pass_rejects_negative() -> None:
    a = [3, -4, 5]
    with pytest.raises(NegativeValueError) as exc:
        radix_lsd.digit_counting_pass(a, 1)
    assert exc.value.index == 1 and exc.value.value == -4
    assert a == [3, -4, 5]


# ------------------------- full sort ------------------------- #

def test_pass_count_follows_max_digits() -> None:
    assert list(radix_lsd.iter_passes([802, 2, 24])) == [1, 10, 100]
    assert list(radix_lsd.iter_passes([9, 1])) == [1]
    assert list(radix_lsd.iter_passes([1000])) == [1, 10, 100, 1000]


def test_all_zero_input_needs_no_pass() -> None:
    a = [0, 0, 0]
    assert list(radix_lsd.iter_passes(a)) == []
    assert a == [0, 0, 0]


def test_empty_input_needs_no_pass() -> None:
    assert list(radix_lsd.iter_passes([])) == []


def test_larger_base_means_fewer_passes() -> None:
    a = [123456, 7, 99999, 65536]
    assert len(list(radix_lsd.iter_passes(list(a), base=10))) == 6
    assert len(list(radix_lsd.iter_passes(list(a), base=1000))) == 2
    assert len(list(radix_lsd.iter_passes(list(a), base=2**20))) == 1


@pytest.mark.parametrize("base", [2, 8, 10, 16, 256, 1000])
@settings(deadline=None, max_examples=30)
@given(a=st.lists(st.integers(min_value=0, max_value=10**9), max_size=150))
def test_property_any_base(base: int, a: List[int]) -> None:
    assert radix_lsd.sort(a, config={"base": base}) == sorted(a)


def test_negative_input_rejected_and_untouched() -> None:
    a = [5, 1, -3, 2]
    with pytest.raises(NegativeValueError) as exc:
        radix_lsd.sort_inplace(a)
    assert isinstance(exc.value, ValueError)
    assert exc.value.index == 2 and exc.value.value == -3
    assert a == [5, 1, -3, 2]


@pytest.mark.parametrize("base", [1, 0, -10, "10", 2.0, None])
def test_bad_base_config(base) -> None:
    with pytest.raises(ConfigError):
        radix_lsd.sort([3, 1], config={"base": base})


def test_large_values() -> None:
    a = [2**64 + 1, 2**64, 0, 10**20]
    assert radix_lsd.sort(a) == sorted(a)
