"""Typed configuration dataclasses for fuzzio.

Provides strongly-typed configuration objects that can be used throughout
the library for better type safety and IDE support.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, Any


@dataclass
class MatchingConfig:
    """Default thresholds and remap behavior for a MatchingEngine."""
    min_similarity: float | None = None  # 0-100, None/0 = unbounded
    max_distance: int | None = None  # None/0 = unbounded
    strict_byte_remap: bool = False  # enforce the 128-character single-byte remap ceiling

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for backward compatibility."""
        return asdict(self)


@dataclass
class LoggingConfig:
    """Diagnostic logging configuration."""
    recompute_summary: bool = True  # emit one DEBUG summary line per recompute pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for backward compatibility."""
        return asdict(self)


@dataclass
class AppConfig:
    """Root configuration with all subsections."""
    matching: MatchingConfig = field(default_factory=MatchingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary.

        Returns:
            Nested dict structure matching config format
        """
        return {
            "matching": self.matching.to_dict(),
            "logging": self.logging.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Args:
            data: Nested dict as produced by to_dict()

        Returns:
            Typed AppConfig instance
        """
        return cls(
            matching=MatchingConfig(**data.get("matching", {})),
            logging=LoggingConfig(**data.get("logging", {})),
        )


def validate_matching_config(cfg: MatchingConfig) -> MatchingConfig:
    """Check threshold ranges and return the config unchanged.

    Raises:
        ValueError: If a threshold lies outside its valid range
    """
    if cfg.min_similarity is not None and not 0 <= float(cfg.min_similarity) <= 100:
        raise ValueError(
            f"matching.min_similarity must be between 0 and 100, got {cfg.min_similarity}"
        )
    if cfg.max_distance is not None and int(cfg.max_distance) < 0:
        raise ValueError(
            f"matching.max_distance must be non-negative, got {cfg.max_distance}"
        )
    return cfg


__all__ = [
    "AppConfig",
    "MatchingConfig",
    "LoggingConfig",
    "validate_matching_config",
]
