from __future__ import annotations

"""True Damerau-Levenshtein distance (unrestricted transpositions)."""

from typing import Dict, Hashable, List, Optional, Sequence

from .errors import ResourceExhaustionError


def _allocate_table(rows: int, cols: int, fill: int) -> List[List[int]]:
    return [[fill] * cols for _ in range(rows)]


def damerau_levenshtein(
    a: Sequence[Hashable], b: Sequence[Hashable], *, max_cells: Optional[int] = None
) -> int:
    """Return the true Damerau-Levenshtein distance between *a* and *b*.

    Insertions, deletions, substitutions and transpositions of adjacent
    symbols each cost one. Unlike optimal string alignment, a transposed pair
    may still be edited afterwards, so ``"CA"`` -> ``"ABC"`` costs 2.

    The table has one extra sentinel row and column holding ``len(a) + len(b)``,
    which is larger than any real distance. Row ``i + 1`` / column ``j + 1``
    holds the distance between ``a[:i]`` and ``b[:j]``.

    Symbols only need to be hashable, so strings, bytes and token lists all
    work. Neither input is modified.

    Raises :class:`ResourceExhaustionError` if the table would exceed
    *max_cells* or cannot be allocated.
    """

    n = len(a)
    m = len(b)
    inf = n + m
    cells = (n + 2) * (m + 2)
    if max_cells is not None and cells > max_cells:
        raise ResourceExhaustionError(n, m, cells, limit=max_cells)
    try:
        table = _allocate_table(n + 2, m + 2, inf)
    except MemoryError as exc:
        raise ResourceExhaustionError(n, m, cells) from exc

    for i in range(n + 1):
        table[i + 1][1] = i
    for j in range(m + 1):
        table[1][j + 1] = j

    # row (1-based into a) where each symbol was last seen; 0 = not yet
    last_row: Dict[Hashable, int] = {}

    for i in range(1, n + 1):
        symbol_a = a[i - 1]
        previous = table[i]
        current = table[i + 1]
        last_match_col = 0
        for j in range(1, m + 1):
            symbol_b = b[j - 1]
            i1 = last_row.get(symbol_b, 0)
            j1 = last_match_col
            if symbol_a == symbol_b:
                cost = 0
                last_match_col = j
            else:
                cost = 1
            current[j + 1] = min(
                previous[j + 1] + 1,
                current[j] + 1,
                previous[j] + cost,
                table[i1][j1] + (i - i1 - 1) + 1 + (j - j1 - 1),
            )
        last_row[symbol_a] = i

    return table[n + 1][m + 1]
