"""Matching package exposing the ranking engine and its primitives.

`matching_engine.py` owns the haystack, cache and thresholds; the remaining
modules are pure helpers that the engine composes.
"""

from .candidate import MatchCandidate
from .metrics import similarity_percent, levenshtein_distance
from .remap import ExtendedAsciiRemapper, RemapOverflowError
from .matching_engine import MatchingEngine

__all__ = [
    "MatchCandidate",
    "MatchingEngine",
    "ExtendedAsciiRemapper",
    "RemapOverflowError",
    "similarity_percent",
    "levenshtein_distance",
]
