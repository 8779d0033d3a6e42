"""Ready-made normalizers for MatchingEngine.

Each function is a plain ``str -> str`` transform that can be passed as the
engine's ``normalizer`` directly, or chained with :func:`compose`.
"""

from __future__ import annotations
import re
import unicodedata
from typing import Callable

Normalizer = Callable[[str], str]

_whitespace_pattern = re.compile(r"\s+")


def lowercase(s: str) -> str:
    return s.lower()


def casefold(s: str) -> str:
    """Aggressive caseless form (e.g. German sharp s becomes 'ss')."""
    return s.casefold()


def trim(s: str) -> str:
    return s.strip()


def trim_lower(s: str) -> str:
    return s.strip().lower()


def collapse_whitespace(s: str) -> str:
    """Trim and squeeze internal whitespace runs to a single space."""
    return _whitespace_pattern.sub(" ", s).strip()


def strip_accents(s: str) -> str:
    """Drop diacritics: 'Ánthé' -> 'Anthe'."""
    s = unicodedata.normalize("NFKD", s)
    s = "".join(c for c in s if not unicodedata.combining(c))
    return unicodedata.normalize("NFC", s)


def compose(*normalizers: Normalizer) -> Normalizer:
    """Chain normalizers left to right into a single callable.

    Example:
        engine.set_normalizer(compose(strip_accents, trim_lower))
    """
    def _composed(s: str) -> str:
        for fn in normalizers:
            s = fn(s)
        return s

    _composed.__name__ = "+".join(getattr(fn, "__name__", "normalizer") for fn in normalizers) or "identity"
    return _composed


__all__ = [
    "Normalizer",
    "lowercase",
    "casefold",
    "trim",
    "trim_lower",
    "collapse_whitespace",
    "strip_accents",
    "compose",
]
