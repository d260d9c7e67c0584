"""
Demonstration: sort one small array with every algorithm and print it.

    linsort-demo
    linsort-demo 9 3 7 3 0
"""

from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from linsort.algorithms import ALGORITHMS
from linsort.errors import SortError
from linsort.validate import is_nondecreasing

DEMO_VALUES: List[int] = [170, 45, 75, 90, 802, 24, 2, 66]

logger = logging.getLogger(__name__)

__all__ = ["DEMO_VALUES", "format_array", "run_demo", "main"]


def format_array(a: Sequence[int], label: str, max_elements: int = 20) -> str:
    """
    "label: v0 v1 ..." showing at most `max_elements` values, with a
    "... (N total elements)" marker when truncated.
    """
    shown = " ".join(str(v) for v in a[:max_elements])
    line = f"{label}: {shown}"
    if len(a) > max_elements:
        line += f" ... ({len(a)} total elements)"
    return line


def run_demo(values: Optional[Sequence[int]] = None, console: Optional[Console] = None) -> Dict[str, List[int]]:
    """Sort `values` (default DEMO_VALUES) with each algorithm; return outputs by name."""
    console = console or Console()
    values = list(DEMO_VALUES if values is None else values)
    results: Dict[str, List[int]] = {}

    for i, (name, mod) in enumerate(ALGORITHMS.items(), start=1):
        console.rule(f"{i}. {mod.DISPLAY_NAME}", align="left")
        work = list(values)
        console.print(format_array(work, "Original"), highlight=False)
        try:
            mod.sort_inplace(work)
        except SortError as e:
            console.print(f"[yellow]skipped:[/yellow] {e}")
            console.print()
            continue
        console.print(format_array(work, "Sorted  "), highlight=False)
        if not is_nondecreasing(work):
            logger.error("%s did not sort correctly", mod.DISPLAY_NAME)
        results[name] = work
        console.print()

    return results


def main(argv: Optional[List[str]] = None) -> None:
    p = argparse.ArgumentParser(description="Run every linear-time sort on a small array.")
    p.add_argument("values", nargs="*", type=int, help="Integers to sort (default: the demo array)")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(message)s", handlers=[RichHandler(rich_tracebacks=True)])
    run_demo(args.values or None)


if __name__ == "__main__":
    main()
