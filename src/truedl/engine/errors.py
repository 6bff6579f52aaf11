from __future__ import annotations

"""Errors raised by the distance engine."""

from typing import Optional


class ResourceExhaustionError(MemoryError):
    """Raised when the working table for a distance call cannot be allocated.

    Either the interpreter ran out of memory while building the table, or the
    caller supplied ``max_cells`` and the inputs would need more cells than
    that.
    """

    def __init__(self, n: int, m: int, cells: int, *, limit: Optional[int] = None) -> None:
        self.n = n
        self.m = m
        self.cells = cells
        self.limit = limit
        if limit is not None:
            message = (
                f"Distance table for lengths {n}x{m} needs {cells} cells, "
                f"above the limit of {limit}"
            )
        else:
            message = f"Could not allocate {cells} cells for lengths {n}x{m}"
        super().__init__(message)
