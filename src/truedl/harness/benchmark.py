from __future__ import annotations

"""Batch benchmark over growing random DNA pairs."""

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

import numpy as np
from loguru import logger

from ..config import BenchmarkConfig
from ..engine import damerau_levenshtein
from ..utils import artefacts
from .generators import random_sequence
from .timing import time_pair_us

CSV_HEADER = ("length", "iters", "avg_us")

Timer = Callable[..., float]


@dataclass
class BenchmarkRow:
    length: int
    iters: int
    avg_us: float
    distance: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def run_benchmark(config: BenchmarkConfig, *, timer: Timer = time_pair_us) -> List[BenchmarkRow]:
    """Time one random pair per configured length, in order.

    Both sequences of a pair come from the same generator, so the inputs for
    every length depend only on ``config.seed`` and the preceding lengths.
    """

    rng = np.random.default_rng(config.seed)
    rows: List[BenchmarkRow] = []
    for length in config.lengths:
        a = random_sequence(length, rng, config.alphabet)
        b = random_sequence(length, rng, config.alphabet)
        iters = config.iterations_for(length)
        avg_us = timer(a, b, iters, warmup=config.warmup, max_cells=config.max_cells)
        distance = damerau_levenshtein(a, b, max_cells=config.max_cells)
        logger.info("L={}  iters={}  avg_us={:.3f}", length, iters, avg_us)
        rows.append(BenchmarkRow(length=length, iters=iters, avg_us=avg_us, distance=distance))
    return rows


def write_results_csv(rows: Iterable[BenchmarkRow], path: Path) -> None:
    artefacts.write_csv(
        path,
        CSV_HEADER,
        ([row.length, row.iters, f"{row.avg_us:.6f}"] for row in rows),
    )


def summary_path_for(csv_path: Path) -> Path:
    return csv_path.with_name(f"{csv_path.stem}.summary.json")


def persist_benchmark(
    rows: Iterable[BenchmarkRow], csv_path: Path, *, config: BenchmarkConfig
) -> Path:
    """Write the results CSV and a JSON summary beside it; return the summary path."""

    from .reports import summarise

    records = list(rows)
    write_results_csv(records, csv_path)
    logger.info("Wrote {} rows to {}", len(records), csv_path)

    summary_path = summary_path_for(csv_path)
    artefacts.write_json(
        summary_path,
        {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "config": config.model_dump(mode="json"),
            "summary": summarise(records),
            "rows": [row.to_dict() for row in records],
        },
    )
    return summary_path
