"""
Experiment runner: one benchmarking sweep from a YAML config.

Usage (from repo root):
    linsort-bench experiments/configs/02_distributions.yaml
    python -m linsort.bench.runner experiments/configs/02_distributions.yaml

Config keys:
    experiment_name, output_dir, seed, repeats, warmup, disable_gc,
    timeout_seconds, sizes, algorithms
    and either
    dataset:  {dist, params}                 # one dataset
    datasets: [{label, dist, params}, ...]   # several, compared side by side

Outputs in a new run directory:
    - config_resolved.yaml
    - meta.json        environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl    one line per timing sample, timeout or error
    - summary.csv      median + IQR per (dataset, algo, n)
    - (console) one rich table per dataset

For each (dataset, n) ONE input is generated and every algorithm gets its
own copy of it. Sizes run in ascending order, so after a timeout or error an
algorithm is skipped for the larger sizes of that dataset.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import os
import platform
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from tqdm import tqdm

import linsort
from linsort.algorithms import get_algorithm
from linsort.bench.measure import time_sort_call
from linsort.datasets import make_dataset

logger = logging.getLogger(__name__)

_console = Console()

REQUIRED_KEYS = [
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "sizes",
    "algorithms",
]

SUMMARY_COLUMNS = ["dataset", "algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    name: str
    display_name: str
    sort_fn: Any
    config: Dict[str, Any]


@dataclass(frozen=True)
class DatasetSpec:
    label: str
    spec: Dict[str, Any]


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"{path}: top level must be a mapping")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        suffix += 1
        run_dir = base_dir / f"{_timestamp()}_{experiment_name}_{suffix}"
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "linsort": linsort.__version__,
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


# ------------------------- config resolution ------------------------- #

def _resolve_algorithms(cfg_algos: List[Any]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        if isinstance(entry, str):
            entry = {"name": entry}
        if not isinstance(entry, dict):
            raise ValueError(f"Algorithm entries must be names or mappings; got {entry!r}")
        name = entry.get("name")
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)

        mod = get_algorithm(name)
        config = entry.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")
        # Empty input still parses the config, so bad keys fail here and not mid-run.
        mod.sort([], config=config)

        specs.append(AlgoSpec(name=name, display_name=mod.DISPLAY_NAME, sort_fn=mod.sort, config=config))
    if not specs:
        raise ValueError("Config 'algorithms' must list at least one algorithm")
    return specs


def _resolve_datasets(cfg: Dict[str, Any]) -> List[DatasetSpec]:
    if ("dataset" in cfg) == ("datasets" in cfg):
        raise ValueError("Config must define exactly one of 'dataset' or 'datasets'")

    raw = [cfg["dataset"]] if "dataset" in cfg else cfg["datasets"]
    if not isinstance(raw, list) or not raw:
        raise ValueError("Config 'datasets' must be a non-empty list")

    out: List[DatasetSpec] = []
    seen = set()
    for entry in raw:
        if not isinstance(entry, dict) or "dist" not in entry:
            raise ValueError(f"Dataset entries must be mappings with a 'dist'; got {entry!r}")
        label = str(entry.get("label") or entry["dist"])
        if label in seen:
            raise ValueError(f"Duplicate dataset label in config: {label}")
        seen.add(label)
        out.append(DatasetSpec(label=label, spec={"dist": entry["dist"], "params": entry.get("params") or {}}))
    return out


# ------------------------- summary ------------------------- #

def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    # labels like "1000" must stay strings to match DatasetSpec.label
    df = pd.read_json(jsonl_path, lines=True, dtype={"dataset": str, "algo": str})
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    out = (
        df.groupby(["dataset", "algo", "n"], as_index=False, sort=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            iqr_ns=("time_ns", lambda s: s.quantile(0.75) - s.quantile(0.25)),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
        )
    )
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[["median_ns", "iqr_ns", "min_ns", "max_ns"]].astype("int64")
    return out[SUMMARY_COLUMNS].reset_index(drop=True)


def _size_picks(sizes: List[int]) -> List[int]:
    if len(sizes) <= 4:
        return list(sizes)
    # first / middle / last
    return [sizes[0], sizes[len(sizes) // 2], sizes[-1]]


def _format_cell(median_ns: int, iqr_ns: int) -> str:
    return f"{median_ns / 1e6:.3f} ± {iqr_ns / 1e6:.3f}"


def _print_summary(
    summary: pd.DataFrame, datasets: List[DatasetSpec], algos: List[AlgoSpec], sizes: List[int], console: Console
) -> None:
    picks = _size_picks(sizes)
    for ds in datasets:
        table = Table(title=f"{ds.label}: median ± IQR (ms)")
        table.add_column("Algorithm", style="bold")
        for n in picks:
            table.add_column(f"n={n}", justify="right")

        rows = summary[summary["dataset"] == ds.label]
        for a in algos:
            cells = [a.display_name]
            for n in picks:
                s = rows[(rows["algo"] == a.name) & (rows["n"] == n)]
                if s.empty:
                    cells.append("—")
                else:
                    cells.append(_format_cell(int(s["median_ns"].iloc[0]), int(s["iqr_ns"].iloc[0])))
            table.add_row(*cells)
        console.print(table)
    console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path, *, console: Optional[Console] = None) -> Path:
    console = console or _console
    cfg = _load_yaml(Path(config_path))

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes: List[int] = [int(n) for n in cfg["sizes"]]
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])

    if not sizes or any(n < 0 for n in sizes):
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")

    algos = _resolve_algorithms(list(cfg["algorithms"]))
    datasets = _resolve_datasets(cfg)

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))
    skipped: Dict[Tuple[str, str], bool] = {}

    console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in algos)}")
    console.print(f"[bold]Datasets:[/bold] {', '.join(d.label for d in datasets)}")
    console.print()

    work = [(ds, n) for ds in datasets for n in sorted(sizes)]
    for ds, n in tqdm(work, desc="Inputs", unit="input", disable=None):
        base_a = make_dataset(n, ds.spec, rng)
        logger.debug("dataset %s n=%d generated", ds.label, n)

        for a_spec in algos:
            if skipped.get((ds.label, a_spec.name)):
                continue

            res = time_sort_call(
                algo_name=a_spec.name,
                algo_fn=a_spec.sort_fn,
                a=base_a,
                config=a_spec.config,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
                defensive_copy=True,
                verify=True,
            )

            record = {"dataset": ds.label, "dist": ds.spec["dist"], "algo": a_spec.name, "n": n, "config": a_spec.config}
            for trial, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl({**record, "trial": trial, "time_ns": int(t_ns)}, results_path)

            status = res["status"]
            if status == "timeout":
                skipped[(ds.label, a_spec.name)] = True
                _append_jsonl({**record, "status": "timeout", "timed_out_on_repeat": res["timed_out_on_repeat"]}, results_path)
                logger.info("%s timed out on %s n=%d; skipping larger sizes", a_spec.name, ds.label, n)
            elif status == "error":
                skipped[(ds.label, a_spec.name)] = True
                _append_jsonl({**record, "status": "error", "error": res["error"]}, results_path)
                logger.warning("%s failed on %s n=%d: %s", a_spec.name, ds.label, n, res["error"])

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)

    _print_summary(summary_df, datasets, algos, sorted(sizes), console)

    console.print("[bold green]Done.[/bold green] Wrote:")
    for p in (results_path, summary_path, meta_path, cfg_resolved_path):
        console.print(f" - {p}")

    return run_dir


# ------------------------- CLI ------------------------- #

def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a linear-sort benchmark experiment from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    configure_logging(args.log_level)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
