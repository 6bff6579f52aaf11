from .damerau import damerau_levenshtein
from .errors import ResourceExhaustionError

__all__ = ["damerau_levenshtein", "ResourceExhaustionError"]
