from __future__ import annotations

"""Helpers for loading and summarising benchmark results."""

from pathlib import Path
from statistics import mean
from typing import Any, Dict, List, Sequence

from ..utils import artefacts
from .benchmark import BenchmarkRow


def load_results(csv_path: Path) -> List[BenchmarkRow]:
    if not csv_path.exists():
        raise FileNotFoundError(f"Results not found at {csv_path}")
    rows: List[BenchmarkRow] = []
    for entry in artefacts.read_csv(csv_path):
        distance = entry.get("distance")
        rows.append(
            BenchmarkRow(
                length=int(entry["length"]),
                iters=int(entry["iters"]),
                avg_us=float(entry["avg_us"]),
                distance=int(distance) if distance else None,
            )
        )
    return rows


def summarise(rows: Sequence[BenchmarkRow]) -> Dict[str, Any]:
    if not rows:
        return {
            "num_lengths": 0,
            "total_iters": 0,
            "mean_avg_us": 0.0,
            "max_avg_us": 0.0,
            "slowest_length": None,
            "ns_per_cell": None,
        }

    slowest = max(rows, key=lambda row: row.avg_us)
    longest = max(rows, key=lambda row: row.length)
    ns_per_cell = (
        longest.avg_us * 1000 / (longest.length * longest.length)
        if longest.length
        else None
    )
    return {
        "num_lengths": len(rows),
        "total_iters": sum(row.iters for row in rows),
        "mean_avg_us": mean(row.avg_us for row in rows),
        "max_avg_us": slowest.avg_us,
        "slowest_length": slowest.length,
        "ns_per_cell": ns_per_cell,
    }
