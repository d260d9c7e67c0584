"""
Synthetic integer datasets for the linear-sort benchmarks.

Distributions (spec = {"dist": name, "params": {...}}):

- "uniform":
    Uniform integers over params["range"] = [lo, hi] (inclusive),
    default [0, 1000].
- "normal":
    Normal(mean=500, std=150), truncated toward zero and clipped to
    params["clip"] = [lo, hi] (default [0, 1000]).
- "skewed":
    Right-skewed: Exponential(rate=0.003), truncated, capped at
    params["cap"] (default 1000). More small values than large ones.
- "exponential":
    Same shape as "skewed" with rate 0.005 by default.
- "small_range":
    Uniform over a small domain; default [0, 255]. Configure with
    params["range"] or params["min_val"] / params["max_val"].
    [0, 10] is the bucket sort worst case, [0, 9] the many-duplicates case.
- "few_uniques":
    params["k"] distinct values drawn from an optional inclusive range
    (default [0, 4294967295]), then n samples from those values.
- "nearly_sorted":
    [0..n-1] with ceil(params["swap_frac"] * n) random index swaps
    (default swap_frac 0.05).
- "reversed":
    [n-1, ..., 0]; params and rng unused.

Public API:
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

Results are plain `list[int]` so the algorithms never see NumPy types.
The caller owns and seeds the RNG.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import numpy as np

Params = Dict[str, Any]
_Generator = Callable[[int, Params, np.random.Generator], List[int]]

__all__ = ["SUPPORTED_DISTS", "make_dataset"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate `n` integers following `spec`, drawing from `rng`.

    Parameters
    ----------
    n : int
        Number of elements, >= 0.
    spec : dict
        {"dist": <one of SUPPORTED_DISTS>, "params": {...}}. "params" is
        optional; see the module docstring for each distribution's keys.
    rng : numpy.random.Generator
        Caller-owned generator.

    Returns
    -------
    list[int]

    Raises
    ------
    ValueError
        Bad `n`, unknown distribution, or invalid params.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    gen = _GENERATORS.get(dist) if isinstance(dist, str) else None
    if gen is None:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")
    return gen(int(n), params, rng)


# ------------------------- distributions ------------------------- #


def _uniform(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    lo, hi = _inclusive_range(params, "range", default=(0, 1000), where="uniform")
    if n == 0:
        return []
    # integers() is half-open by default
    return rng.integers(lo, hi, size=n, dtype=np.int64, endpoint=True).tolist()


def _normal(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    mean = _number(params, "mean", 500.0, where="normal")
    std = _number(params, "std", 150.0, where="normal")
    if std < 0:
        raise ValueError(f"normal.params.std must be >= 0; got {std}")
    lo, hi = _inclusive_range(params, "clip", default=(0, 1000), where="normal")
    if n == 0:
        return []
    draws = np.trunc(rng.normal(mean, std, size=n)).astype(np.int64)
    return np.clip(draws, lo, hi).tolist()


def _exponential_like(default_rate: float, where: str) -> _Generator:
    def gen(n: int, params: Params, rng: np.random.Generator) -> List[int]:
        rate = _number(params, "rate", default_rate, where=where)
        if rate <= 0:
            raise ValueError(f"{where}.params.rate must be > 0; got {rate}")
        cap = _int(params, "cap", 1000, where=where)
        if n == 0:
            return []
        draws = np.trunc(rng.exponential(1.0 / rate, size=n)).astype(np.int64)
        return np.minimum(draws, cap).tolist()

    return gen


def _small_range(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    if "range" in params:
        lo, hi = _inclusive_range(params, "range", default=(0, 255), where="small_range")
    else:
        lo = _int(params, "min_val", 0, where="small_range")
        hi = _int(params, "max_val", 255, where="small_range")
        if lo > hi:
            raise ValueError(f"small_range invalid: min > max ({lo} > {hi})")
    if n == 0:
        return []
    return rng.integers(lo, hi, size=n, dtype=np.int64, endpoint=True).tolist()


def _few_uniques(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _inclusive_range(params, "range", default=(0, 4294967295), where="few_uniques")
    if n == 0:
        return []

    actual_k = min(k, n, hi - lo + 1)
    # Rejection sampling on the caller's rng; k is expected to be << span.
    values: List[int] = []
    seen = set()
    while len(values) < actual_k:
        batch = rng.integers(lo, hi, size=2 * (actual_k - len(values)), endpoint=True)
        for v in map(int, batch):
            if v not in seen:
                seen.add(v)
                values.append(v)
                if len(values) == actual_k:
                    break

    idxs = rng.integers(0, actual_k, size=n)
    return [values[int(i)] for i in idxs]


def _nearly_sorted(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    swap_frac = _number(params, "swap_frac", 0.05, where="nearly_sorted")
    if not 0.0 <= swap_frac <= 1.0:
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {swap_frac}")
    arr = list(range(n))
    swaps = int(np.ceil(swap_frac * n))
    if swaps <= 0:
        return arr
    idxs = rng.integers(0, n, size=2 * swaps)
    for s in range(swaps):
        i, j = int(idxs[2 * s]), int(idxs[2 * s + 1])
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def _reversed(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


_GENERATORS: Dict[str, _Generator] = {
    "uniform": _uniform,
    "normal": _normal,
    "skewed": _exponential_like(0.003, "skewed"),
    "exponential": _exponential_like(0.005, "exponential"),
    "small_range": _small_range,
    "few_uniques": _few_uniques,
    "nearly_sorted": _nearly_sorted,
    "reversed": _reversed,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


# ------------------------- param parsing ------------------------- #


def _is_int_like(x: Any) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)


def _int(params: Params, name: str, default: int, *, where: str) -> int:
    val = params.get(name, default)
    if not _is_int_like(val):
        raise ValueError(f"{where}.params.{name} must be an integer; got {val!r}")
    return int(val)


def _number(params: Params, name: str, default: float, *, where: str) -> float:
    val = params.get(name, default)
    if isinstance(val, bool):
        raise ValueError(f"{where}.params.{name} must be a number; got {val!r}")
    try:
        return float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{where}.params.{name} must be a number; got {val!r}") from e


def _inclusive_range(
    params: Params, name: str, *, default: Tuple[int, int], where: str
) -> Tuple[int, int]:
    if name not in params:
        return default
    spec = params[name]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{where}.params.{name} must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"{where}.params.{name} values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{where}.params.{name} invalid: min > max ({lo} > {hi})")
    return lo, hi
