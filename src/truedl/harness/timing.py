from __future__ import annotations

"""Wall-clock timing of repeated distance calls."""

import time
from typing import Hashable, Optional, Sequence

from ..engine import damerau_levenshtein


def time_pair_us(
    a: Sequence[Hashable],
    b: Sequence[Hashable],
    iters: int,
    *,
    warmup: int = 3,
    max_cells: Optional[int] = None,
) -> float:
    """Mean microseconds per call over *iters* timed calls, after *warmup* untimed ones."""

    if iters <= 0:
        raise ValueError(f"iters must be positive, got {iters}")
    for _ in range(warmup):
        damerau_levenshtein(a, b, max_cells=max_cells)

    start = time.perf_counter()
    for _ in range(iters):
        damerau_levenshtein(a, b, max_cells=max_cells)
    elapsed = time.perf_counter() - start
    return elapsed * 1_000_000 / iters
