"""
End-to-end scenarios on concrete inputs.
"""

from __future__ import annotations

from collections import Counter

import numpy as np
import pytest

from linsort.algorithms import ALGORITHMS, bucket, radix_lsd
from linsort.datasets import make_dataset
from linsort.validate import is_nondecreasing


@pytest.mark.parametrize("name", list(ALGORITHMS))
def test_demo_array(name: str) -> None:
    a = [170, 45, 75, 90, 802, 24, 2, 66]
    ALGORITHMS[name].sort_inplace(a)
    assert a == [2, 24, 45, 66, 75, 90, 170, 802]


def test_radix_each_digit_pass() -> None:
    a = [802, 2, 24]
    seen = []
    for weight in radix_lsd.iter_passes(a):
        seen.append((weight, list(a)))
        # ordered by the digits processed so far
        mods = [v % (weight * 10) for v in a]
        assert mods == sorted(mods)

    assert seen == [
        (1, [802, 2, 24]),
        (10, [802, 2, 24]),
        (100, [2, 24, 802]),
    ]
    assert a == [2, 24, 802]


def test_bucket_worst_case_small_range() -> None:
    rng = np.random.default_rng(2024)
    a = make_dataset(5000, {"dist": "small_range", "params": {"range": [0, 10]}}, rng)
    assert set(a) <= set(range(11))

    out = bucket.sort(a)

    assert is_nondecreasing(out)
    assert Counter(out) == Counter(a)
    assert out == sorted(a)


def test_bucket_identical_values_early_return(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(*args, **kwargs):
        raise AssertionError("bucket assignment must not run when min == max")

    monkeypatch.setattr(bucket, "bucket_index", _boom)
    a = [7, 7, 7, 7]
    bucket.sort_inplace(a)
    assert a == [7, 7, 7, 7]


@pytest.mark.parametrize("name", list(ALGORITHMS))
def test_identical_values(name: str) -> None:
    assert ALGORITHMS[name].sort([7, 7, 7, 7]) == [7, 7, 7, 7]
