"""Elementary string metrics used by the matching engine.

Both functions are pure and operate per character, so callers that want
one comparison unit per visible character should remap their input first
(see :mod:`fuzzio.match.remap`).

similarity_percent reproduces the classic ``similar_text`` overlap score:
find the longest common substring, then recurse into the pieces left and
right of it, summing matched characters. ``difflib.SequenceMatcher`` with
autojunk disabled walks exactly that recursion (earliest match in ``a``,
then earliest in ``b``), so its matching blocks give the same total.
"""

from __future__ import annotations

from difflib import SequenceMatcher
from rapidfuzz.distance import Levenshtein


def similarity_percent(a: str, b: str) -> float:
    """Return overlap similarity between two strings as a percentage (0-100).

    Two empty strings score 0.0, not 100.0.
    """
    total = len(a) + len(b)
    if total == 0:
        return 0.0
    matcher = SequenceMatcher(None, a, b, autojunk=False)
    common = sum(block.size for block in matcher.get_matching_blocks())
    return common * 2 * 100.0 / total


def levenshtein_distance(a: str, b: str) -> int:
    """Unit-cost insert/delete/substitute edit distance."""
    return int(Levenshtein.distance(a, b))


__all__ = ["similarity_percent", "levenshtein_distance"]
