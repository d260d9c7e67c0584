"""
Helpers shared by the algorithm modules: config parsing, min/max over
keys, and the range guard used by the table-based sorts.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from linsort.errors import ConfigError, RangeTooLargeError

KeyFn = Callable[[Any], int]

__all__ = ["KeyFn", "parse_config", "key_bounds", "keys_of", "check_span", "positive_int_or_none"]


def parse_config(
    algo: str, config: Optional[Dict[str, Any]], defaults: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Merge `config` over `defaults`, rejecting keys the algorithm does not know.
    """
    if config is None:
        return dict(defaults)
    if not isinstance(config, dict):
        raise ConfigError(f"{algo}: config must be a dict, got {type(config).__name__}")
    unknown = sorted(set(config) - set(defaults))
    if unknown:
        raise ConfigError(
            f"{algo}: unknown config key(s) {unknown}; supported: {sorted(defaults)}"
        )
    merged = dict(defaults)
    merged.update(config)
    return merged


def positive_int_or_none(algo: str, name: str, value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"{algo}: {name} must be a positive integer or null; got {value!r}")
    return value


def keys_of(a: Sequence[Any], key: Optional[KeyFn]) -> List[int]:
    if key is None:
        return list(a)
    return [key(x) for x in a]


def key_bounds(keys: Sequence[int]) -> Tuple[int, int]:
    """Single pass min/max. `keys` must be non-empty."""
    lo = hi = keys[0]
    for k in keys:
        if k < lo:
            lo = k
        elif k > hi:
            hi = k
    return lo, hi


def check_span(algo: str, span: int, max_range: Optional[int]) -> None:
    if max_range is not None and span > max_range:
        raise RangeTooLargeError(algo, span, max_range)
