"""Matching engine ranking a haystack of strings against a needle.

This module provides the engine that owns the haystack, the metric cache,
the thresholds and the normalizer, and rebuilds the ranked result list on
every mutation. Scoring itself is delegated to :mod:`fuzzio.match.metrics`.
"""

from __future__ import annotations
import time
import logging
from contextlib import contextmanager
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .candidate import MatchCandidate
from .metrics import similarity_percent, levenshtein_distance
from .remap import ExtendedAsciiRemapper
from ..config_types import AppConfig, MatchingConfig
from ..utils.logging_helpers import log_recompute

logger = logging.getLogger(__name__)

Normalizer = Callable[[str], str]


def _to_text(value: object) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _to_unique_texts(values: Iterable[object] | str | bytes | None) -> List[str]:
    """Coerce to a list of distinct strings, keeping first occurrences in order."""
    if values is None:
        return []
    if isinstance(values, (str, bytes)):
        values = [values]
    return list(dict.fromkeys(_to_text(v) for v in values))


def _to_number(value: object) -> float | None:
    """Coerce a threshold to float; None, empty and non-numeric input give None."""
    if value is None:
        return None
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def _passes(
    candidate: MatchCandidate,
    min_similarity: float | None,
    max_distance: int | None,
) -> bool:
    if min_similarity is not None and candidate.similarity < min_similarity:
        return False
    # An exact match (distance 0) is never dropped by the distance bound
    if max_distance is not None and candidate.distance and candidate.distance > max_distance:
        return False
    return True


class MatchingEngine:
    """Rank candidate strings by similarity to a reference string.

    Every mutator triggers a full recompute pass:
    1. Normalize the needle and each haystack entry
    2. Reuse cached (similarity, distance) per original string, or remap
       non-ASCII characters and score from scratch
    3. Apply the minimum-similarity and maximum-distance thresholds
    4. Stable sort by similarity (highest first) and swap the result list

    The cache is keyed by the original haystack string only. It is wiped by
    set_haystack() and remove_from_haystack() but survives add_to_haystack()
    and set_normalizer(), so entries scored under a previous normalizer keep
    their old metrics until the haystack is reset.

    Mutators are transactional: if the normalizer raises, the engine is
    restored to its pre-call state before the exception propagates.

    Example usage:
        engine = MatchingEngine("test", ["test1", "tested", "toast"], normalizer=str.lower)
        best = engine.get_closest_one()
        close = engine.set_max_levenshtein_distance_threshold(2).get(min_similarity=80)
    """

    def __init__(
        self,
        needle: object,
        haystack: Iterable[object] | None = None,
        normalizer: Normalizer | None = None,
        *,
        config: MatchingConfig | None = None,
        summary_logging: bool = True,
    ):
        """Initialize the engine.

        Args:
            needle: Reference string (non-strings are stringified)
            haystack: Optional initial candidates, scored immediately
            normalizer: Optional str -> str transform applied before comparison
            config: Optional MatchingConfig providing default thresholds
            summary_logging: Emit a DEBUG summary line per recompute pass
        """
        cfg = config or MatchingConfig()

        self._needle = _to_text(needle)
        self._haystack: List[str] = []
        self._result: List[MatchCandidate] = []
        self._cache: Dict[str, Tuple[float, int]] = {}
        self._normalizer: Normalizer | None = None
        self._min_similarity: float | None = self._coerce_similarity(cfg.min_similarity)
        self._max_distance: int | None = self._coerce_distance(cfg.max_distance)
        self._remapper = ExtendedAsciiRemapper(strict_byte_ceiling=cfg.strict_byte_remap)
        self._summary_logging = summary_logging

        self.set_normalizer(normalizer)

        if haystack is not None:
            items = _to_unique_texts(haystack)
            if items:
                self.set_haystack(items)

    @classmethod
    def from_config(
        cls,
        needle: object,
        haystack: Iterable[object] | None = None,
        normalizer: Normalizer | None = None,
        config: AppConfig | MatchingConfig | None = None,
    ) -> MatchingEngine:
        """Build an engine from a typed config (see fuzzio.config.load_config)."""
        if isinstance(config, AppConfig):
            return cls(
                needle,
                haystack,
                normalizer,
                config=config.matching,
                summary_logging=config.logging.recompute_summary,
            )
        return cls(needle, haystack, normalizer, config=config)

    # --- Accessors ---------------------------------------------------------

    def get_needle(self) -> str:
        return self._needle

    def get_normalized_needle(self) -> str:
        return self._normalize(self._needle)

    def get_haystack(self) -> List[str]:
        return list(self._haystack)

    def get_normalized_haystack(self) -> List[str]:
        return [self._normalize(s) for s in self._haystack]

    def get_normalizer(self) -> Normalizer | None:
        return self._normalizer

    def get_min_similarity_threshold(self) -> float | None:
        return self._min_similarity

    def get_max_levenshtein_distance_threshold(self) -> int | None:
        return self._max_distance

    def __len__(self) -> int:
        return len(self._result)

    def __iter__(self) -> Iterator[MatchCandidate]:
        return iter(list(self._result))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(needle={self._needle!r}, haystack={len(self._haystack)}, "
            f"results={len(self._result)})"
        )

    # --- Mutators ----------------------------------------------------------

    def set_haystack(self, strings: Iterable[object] | None) -> MatchingEngine:
        """Replace the haystack, wiping cache and results, then recompute."""
        with self._rollback_on_error():
            self._drop_haystack()
            self._haystack = _to_unique_texts(strings)
            self._recompute()
        return self

    def add_to_haystack(self, strings: Iterable[object] | None) -> MatchingEngine:
        """Append new distinct strings and recompute; cached metrics are kept."""
        additions = _to_unique_texts(strings)
        with self._rollback_on_error():
            self._haystack = list(dict.fromkeys(self._haystack + additions))
            self._recompute()
        return self

    def remove_from_haystack(self, strings: Iterable[object] | None) -> MatchingEngine:
        """Remove strings and recompute.

        The cache is wiped first, so the surviving entries are re-scored from
        scratch rather than reusing their previous metrics.
        """
        removals = set(_to_unique_texts(strings))
        with self._rollback_on_error():
            previous = self._haystack
            self._drop_haystack()
            self._haystack = [s for s in previous if s not in removals]
            self._recompute()
        return self

    def set_normalizer(self, normalizer: Normalizer | None) -> MatchingEngine:
        """Install (or clear with None) the normalizer and recompute.

        Already cached metrics are not invalidated.

        Raises:
            TypeError: If normalizer is neither callable nor None
        """
        if normalizer is not None and not callable(normalizer):
            raise TypeError(f"normalizer must be callable or None, got {type(normalizer).__name__}")
        with self._rollback_on_error():
            self._normalizer = normalizer
            self._recompute()
        return self

    def set_min_similarity_threshold(self, threshold: object) -> MatchingEngine:
        """Set the inclusive similarity lower bound; 0, None or non-numeric clears it."""
        with self._rollback_on_error():
            self._min_similarity = self._coerce_similarity(threshold)
            self._recompute()
        return self

    def set_max_levenshtein_distance_threshold(self, threshold: object) -> MatchingEngine:
        """Set the inclusive distance upper bound; 0, None or non-numeric clears it."""
        with self._rollback_on_error():
            self._max_distance = self._coerce_distance(threshold)
            self._recompute()
        return self

    # --- Queries -----------------------------------------------------------

    def get(self, min_similarity: float | None = None, max_distance: int | None = None) -> List[MatchCandidate]:
        """Return ranked results filtered by ad-hoc bounds.

        Stored thresholds and the cache are left untouched. Omitted bounds
        impose no restriction, and so do non-numeric ones; records with
        distance 0 always pass the distance bound.
        """
        min_similarity = _to_number(min_similarity)
        bound = _to_number(max_distance)
        max_distance = None if bound is None else int(bound)
        return [c for c in self._result if _passes(c, min_similarity, max_distance)]

    def get_closest(self) -> List[MatchCandidate]:
        """Return every result sharing the highest similarity (ties included)."""
        if not self._result:
            return []
        best = max(c.similarity for c in self._result)
        return [c for c in self._result if c.similarity == best]

    def get_closest_one(self) -> Optional[MatchCandidate]:
        closest = self.get_closest()
        return closest[0] if closest else None

    def has_exact_match(self) -> bool:
        """True if the normalized needle equals some normalized haystack entry."""
        return self.get_normalized_needle() in self.get_normalized_haystack()

    def get_max_similarity(self) -> float | None:
        """Highest similarity across all cached metrics (not only filtered results)."""
        if not self._cache:
            return None
        return max(similarity for similarity, _ in self._cache.values())

    def get_min_levenshtein_distance(self) -> int | None:
        """Lowest distance across all cached metrics (not only filtered results)."""
        if not self._cache:
            return None
        return min(distance for _, distance in self._cache.values())

    # --- Internals ---------------------------------------------------------

    def _normalize(self, s: str) -> str:
        s = _to_text(s)
        if self._normalizer is not None:
            s = _to_text(self._normalizer(s))
        return s

    def _drop_haystack(self) -> None:
        self._haystack = []
        self._cache = {}
        self._result = []

    @contextmanager
    def _rollback_on_error(self):
        saved = (
            self._haystack,
            dict(self._cache),
            self._result,
            self._normalizer,
            self._min_similarity,
            self._max_distance,
            self._remapper.snapshot(),
        )
        try:
            yield
        except Exception:
            (
                self._haystack,
                self._cache,
                self._result,
                self._normalizer,
                self._min_similarity,
                self._max_distance,
                remap_table,
            ) = saved
            self._remapper.restore(remap_table)
            logger.debug(f"Rolled back {type(self).__name__} state after failed update")
            raise

    def _recompute(self) -> None:
        start = time.perf_counter()
        debug_logging = logger.isEnabledFor(logging.DEBUG)

        normalized_needle = self.get_normalized_needle()
        scored: List[MatchCandidate] = []
        fresh: Dict[str, Tuple[float, int]] = {}
        cached_hits = 0

        for string in self._haystack:
            normalized = self._normalize(string)
            metrics = self._cache.get(string)
            if metrics is not None:
                cached_hits += 1
            else:
                safe_needle = self._remapper.remap(normalized_needle)
                safe_string = self._remapper.remap(normalized)
                metrics = (
                    similarity_percent(safe_needle, safe_string),
                    levenshtein_distance(safe_needle, safe_string),
                )
                fresh[string] = metrics

            similarity, distance = metrics
            if debug_logging:
                logger.debug(f"{string!r} vs {self._needle!r} sim={similarity:.2f} dist={distance}")
            scored.append(MatchCandidate(string, normalized, similarity, distance))

        result = [c for c in scored if _passes(c, self._min_similarity, self._max_distance)]
        # list.sort is stable: equal similarities keep haystack order
        result.sort(key=lambda c: c.similarity, reverse=True)

        self._cache.update(fresh)
        self._result = result

        if self._summary_logging:
            log_recompute(
                total=len(scored),
                cached=cached_hits,
                scored=len(fresh),
                filtered=len(scored) - len(result),
                elapsed_seconds=time.perf_counter() - start,
                target=logger,
            )

    @staticmethod
    def _coerce_similarity(value: object) -> float | None:
        return _to_number(value) or None

    @staticmethod
    def _coerce_distance(value: object) -> int | None:
        return int(_to_number(value) or 0) or None


__all__ = ["MatchingEngine"]
