"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME, oracle_sort, oracle_sort_by, equals_oracle

    - Property checks:
        is_nondecreasing, first_nondecreasing_violation_index,
        is_permutation, permutation_counter_diff,
        tag_with_index, first_stability_violation_index, is_stable,
        assert_no_mutation
"""

from .oracle import ORACLE_NAME, equals_oracle, oracle_sort, oracle_sort_by
from .properties import (
    assert_no_mutation,
    first_nondecreasing_violation_index,
    first_stability_violation_index,
    is_nondecreasing,
    is_permutation,
    is_stable,
    permutation_counter_diff,
    tag_with_index,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "oracle_sort_by",
    "equals_oracle",
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "tag_with_index",
    "first_stability_violation_index",
    "is_stable",
    "assert_no_mutation",
]
