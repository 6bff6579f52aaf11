from __future__ import annotations

"""Synthetic input sequences for benchmarks."""

import numpy as np

DNA_ALPHABET = "ACGT"


def random_sequence(length: int, rng: np.random.Generator, alphabet: str = DNA_ALPHABET) -> str:
    """Draw *length* symbols uniformly from *alphabet*."""

    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    indices = rng.integers(0, len(alphabet), size=length)
    return "".join(alphabet[index] for index in indices)
