from __future__ import annotations

"""Benchmark configuration models and loading."""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

DEFAULT_LENGTHS = (50, 100, 200, 500, 1000, 2000, 4000)
DEFAULT_SEED = 123456


class IterationTier(BaseModel):
    """Use ``iters`` timed calls for every length of at least ``min_length``."""

    min_length: int = Field(ge=0)
    iters: int = Field(gt=0)


def _default_tiers() -> List[IterationTier]:
    return [
        IterationTier(min_length=500, iters=50),
        IterationTier(min_length=1000, iters=20),
        IterationTier(min_length=2000, iters=10),
        IterationTier(min_length=4000, iters=5),
    ]


class BenchmarkConfig(BaseModel):
    """Settings for one batch benchmark run."""

    lengths: List[int] = Field(default_factory=lambda: list(DEFAULT_LENGTHS))
    seed: int = DEFAULT_SEED
    alphabet: str = Field(default="ACGT", min_length=1)
    warmup: int = Field(default=3, ge=0)
    default_iters: int = Field(default=200, gt=0)
    iteration_tiers: List[IterationTier] = Field(default_factory=_default_tiers)
    max_cells: Optional[int] = Field(default=None, gt=0)

    @field_validator("lengths")
    @classmethod
    def _non_negative_lengths(cls, value: List[int]) -> List[int]:
        if any(length < 0 for length in value):
            raise ValueError("lengths must be non-negative")
        return value

    def iterations_for(self, length: int) -> int:
        """Iteration count for *length*: the highest tier it reaches, else the default."""

        iters = self.default_iters
        best = -1
        for tier in self.iteration_tiers:
            if length >= tier.min_length and tier.min_length > best:
                best = tier.min_length
                iters = tier.iters
        return iters


class ConfigNotFoundError(FileNotFoundError):
    """Raised when a benchmark config file does not exist."""


def load_config(path: Path) -> BenchmarkConfig:
    """Load a :class:`BenchmarkConfig` from a YAML file."""

    if not path.exists():
        raise ConfigNotFoundError(f"Benchmark config not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    try:
        return BenchmarkConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid benchmark config in {path}: {exc}") from exc
