"""Remap non-ASCII characters to compact synthetic codes.

The overlap and edit-distance metrics count comparison units. Text that
arrives as multi-byte sequences must be collapsed to one unit per character
before scoring, otherwise a single Cyrillic letter would be counted as two
separate "characters" and both metrics drift.

Each distinct non-ASCII character is assigned the next free code starting at
128. The table is cumulative for the lifetime of a remapper instance, so a
given character always maps to the same code no matter which string first
introduced it.

The legacy scheme packed codes into one byte, which caps the table at 128
distinct characters. Python strings hold arbitrary code points, so the cap is
only enforced when ``strict_byte_ceiling`` is requested.
"""

from __future__ import annotations

import logging
import re
from typing import Dict

logger = logging.getLogger(__name__)

_FIRST_SYNTHETIC_CODE = 128
_BYTE_CEILING = 256

_NON_ASCII_PATTERN = re.compile(r"[^\x00-\x7f]")


class RemapOverflowError(ValueError):
    """Raised when a strict remapper runs out of single-byte codes."""


class ExtendedAsciiRemapper:
    """Cumulative non-ASCII -> synthetic code substitution table.

    Example usage:
        remapper = ExtendedAsciiRemapper()
        remapper.remap("тест")   # '\\x80\\x81\\x82\\x80'
        remapper.remap("сет")    # '\\x82\\x81\\x80' (reuses known codes)
    """

    def __init__(self, strict_byte_ceiling: bool = False):
        self.strict_byte_ceiling = strict_byte_ceiling
        self._table: Dict[str, str] = {}
        self._translation: Dict[int, str] = {}

    def __len__(self) -> int:
        return len(self._table)

    @property
    def mapping(self) -> Dict[str, str]:
        """Copy of the current character -> synthetic code table."""
        return dict(self._table)

    def remap(self, text: str) -> str:
        """Return ``text`` with every non-ASCII character replaced by its code.

        Plain ASCII input is returned unchanged without touching the table.

        Raises:
            RemapOverflowError: strict mode and a new character would need a
                code above 255
        """
        found = _NON_ASCII_PATTERN.findall(text)
        if not found:
            return text

        for char in found:
            if char not in self._table:
                self._assign(char)

        return text.translate(self._translation)

    def _assign(self, char: str) -> None:
        code = _FIRST_SYNTHETIC_CODE + len(self._table)
        if self.strict_byte_ceiling and code >= _BYTE_CEILING:
            raise RemapOverflowError(
                f"Cannot remap {char!r}: all {_BYTE_CEILING - _FIRST_SYNTHETIC_CODE} "
                "single-byte codes are already assigned"
            )
        synthetic = chr(code)
        self._table[char] = synthetic
        self._translation[ord(char)] = synthetic
        logger.debug(f"remap {char!r} -> {code}")

    def snapshot(self) -> Dict[str, str]:
        """Capture the table so a failed operation can roll it back."""
        return dict(self._table)

    def restore(self, table: Dict[str, str]) -> None:
        """Reinstate a table captured by :meth:`snapshot`."""
        self._table = dict(table)
        self._translation = {ord(char): code for char, code in self._table.items()}


__all__ = ["ExtendedAsciiRemapper", "RemapOverflowError"]
