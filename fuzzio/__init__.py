"""Top-level package for fuzzio.

Ranks candidate strings against a reference string by combining a
character-overlap similarity percentage with a Levenshtein edit distance.

Version identifier is defined in :mod:`fuzzio.version` to keep a single source
of truth that can be imported without pulling heavier submodules.
"""

import logging

from .version import __version__  # re-export
from .match import (
    MatchCandidate,
    MatchingEngine,
    ExtendedAsciiRemapper,
    RemapOverflowError,
    similarity_percent,
    levenshtein_distance,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "MatchCandidate",
    "MatchingEngine",
    "ExtendedAsciiRemapper",
    "RemapOverflowError",
    "similarity_percent",
    "levenshtein_distance",
]
