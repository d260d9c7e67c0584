"""
Timing harness for one algorithm on one input.

Each sample times exactly one `sort_fn(arg, config=config)` call with
`time.perf_counter_ns`. Copying the input, GC handling, warmup and output
verification all happen outside the timed block.

Public API:
    time_sort_call(...) -> dict

Returned dict:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # one per completed sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,
        "timed_out_on_repeat": int | None,  # 0-based
    }
"""

from __future__ import annotations

import gc
import logging
import time
from typing import Any, Callable, Dict, List, Optional

from linsort.validate import first_nondecreasing_violation_index

logger = logging.getLogger(__name__)

__all__ = ["time_sort_call"]


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., List[int]],
    a: List[int],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool = True,
    disable_gc: bool = True,
    timeout_seconds: float = 60.0,
    defensive_copy: bool = True,
    verify: bool = True,
) -> Dict[str, Any]:
    """
    Time `repeats` calls of `algo_fn(a, config=config)`.

    Parameters
    ----------
    algo_name : str
        Name recorded in the result.
    algo_fn : Callable
        sort(a: list[int], *, config: dict | None) -> list[int].
    a : list[int]
        Input shared by all samples.
    config : dict | None
        Passed through to the algorithm.
    repeats : int
        Number of timed samples (>= 0).
    warmup : bool
        One untimed call before sampling.
    disable_gc : bool
        Collect, then disable the GC for the timed loop; restored afterwards.
    timeout_seconds : float
        If one sample exceeds this, the result is marked "timeout" and
        sampling stops.
    defensive_copy : bool
        Give every call its own copy of `a`.
    verify : bool
        Check each output is non-decreasing; an unsorted output ends
        sampling with status "error".
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if warmup and repeats > 0:
        try:
            algo_fn(list(a) if defensive_copy else a, config=config)
        except Exception as e:
            logger.warning("%s: warmup failed on n=%d: %r", algo_name, len(a), e)
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    gc_was_enabled = gc.isenabled()
    threshold_ns = int(timeout_seconds * 1e9)
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        for r in range(repeats):
            arg = list(a) if defensive_copy else a
            try:
                t0 = time.perf_counter_ns()
                out = algo_fn(arg, config=config)
                t1 = time.perf_counter_ns()
            except Exception as e:
                logger.warning("%s: failed at repeat %d on n=%d: %r", algo_name, r, len(a), e)
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(elapsed)

            if verify:
                bad = first_nondecreasing_violation_index(out)
                if bad is not None or len(out) != len(a):
                    result["status"] = "error"
                    result["error"] = (
                        f"output not sorted at repeat {r}"
                        + (f" (index {bad}: {out[bad]} > {out[bad + 1]})" if bad is not None else " (length changed)")
                    )
                    logger.error("%s did not sort correctly: %s", algo_name, result["error"])
                    break

            if elapsed > threshold_ns:
                logger.info("%s: sample %d took %.3f s > %.3f s timeout", algo_name, r, elapsed / 1e9, timeout_seconds)
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        if disable_gc and gc_was_enabled:
            gc.enable()

    return result
