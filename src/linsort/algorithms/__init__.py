"""
Algorithm registry.

Each module under this package defines:
    NAME, DISPLAY_NAME, STABLE
    sort(a, *, config=None) -> list[int]       # returns a new list
    sort_inplace(a, *, config=None, ...) -> None  # replaces a's contents

Usage:
    from linsort.algorithms import ALGORITHMS, get_algorithm
    get_algorithm("radix_lsd").sort([170, 45, 75])
"""

from types import ModuleType
from typing import Dict, List

from linsort.errors import UnknownAlgorithmError

from . import bucket, counting_stable, counting_unstable, pigeonhole, radix_lsd

ALGORITHMS: Dict[str, ModuleType] = {
    m.NAME: m for m in (counting_stable, counting_unstable, radix_lsd, pigeonhole, bucket)
}
STABLE_ALGORITHMS: List[str] = [name for name, m in ALGORITHMS.items() if m.STABLE]

__all__ = ["ALGORITHMS", "STABLE_ALGORITHMS", "get_algorithm"]


def get_algorithm(name: str) -> ModuleType:
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise UnknownAlgorithmError(
            f"Unknown algorithm {name!r}. Available: {list(ALGORITHMS)}"
        ) from None
