"""truedl: true Damerau-Levenshtein distance with a benchmark harness."""
from importlib.metadata import version, PackageNotFoundError

from loguru import logger

from .engine import ResourceExhaustionError, damerau_levenshtein

try:
    __version__ = version("truedl")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

logger.disable("truedl")

__all__ = ["__version__", "damerau_levenshtein", "ResourceExhaustionError"]
