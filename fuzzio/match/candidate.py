"""Candidate record produced by the matching engine.

One record per surviving haystack entry. Records are rebuilt on every
recompute pass, even when the metrics behind them came from the cache, so
holding on to one never exposes later engine state.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass(frozen=True)
class MatchCandidate:
    """Scored haystack entry.

    Attributes:
        original: Haystack string exactly as supplied by the caller
        normalized: Same string after the engine's normalizer
        similarity: Character-overlap similarity to the needle (0-100)
        distance: Levenshtein distance to the needle
    """
    original: str
    normalized: str
    similarity: float
    distance: int

    def __post_init__(self) -> None:
        # frozen: coerce through object.__setattr__
        object.__setattr__(self, "original", str(self.original))
        object.__setattr__(self, "normalized", str(self.normalized))
        object.__setattr__(self, "similarity", float(self.similarity))
        object.__setattr__(self, "distance", int(self.distance))

    def __str__(self) -> str:
        return self.original

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for diagnostics output."""
        return asdict(self)


__all__ = ["MatchCandidate"]
