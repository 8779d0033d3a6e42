"""Environment-driven defaults for MatchingEngine.

Only process environment variables are read; nothing touches the file
system or the logging setup of the host application.

    FUZZIO_MIN_SIMILARITY      float 0-100, empty/none = unbounded
    FUZZIO_MAX_DISTANCE        int >= 0, empty/none = unbounded
    FUZZIO_STRICT_BYTE_REMAP   true/false
    FUZZIO_RECOMPUTE_SUMMARY   true/false

Example usage:
    engine = MatchingEngine.from_config(needle, haystack, config=load_config())
"""

from __future__ import annotations
import os
import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Mapping, Tuple

from .config_types import AppConfig, validate_matching_config

logger = logging.getLogger(__name__)

ENV_PREFIX = "FUZZIO_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"expected a boolean, got {raw!r}")


def _parse_optional(cast: Callable[[str], Any]) -> Callable[[str], Any]:
    def _parse(raw: str) -> Any:
        value = raw.strip()
        if value.lower() in {"", "none", "null"}:
            return None
        return cast(value)
    return _parse


# env var suffix -> (config section, field, parser)
_ENV_FIELDS: Dict[str, Tuple[str, str, Callable[[str], Any]]] = {
    "MIN_SIMILARITY": ("matching", "min_similarity", _parse_optional(float)),
    "MAX_DISTANCE": ("matching", "max_distance", _parse_optional(int)),
    "STRICT_BYTE_REMAP": ("matching", "strict_byte_remap", _parse_bool),
    "RECOMPUTE_SUMMARY": ("logging", "recompute_summary", _parse_bool),
}


def load_config(
    environ: Mapping[str, str] | None = None,
    overrides: Dict[str, Dict[str, Any]] | None = None,
) -> AppConfig:
    """Build an AppConfig from defaults <- environment <- overrides.

    Args:
        environ: Mapping to read instead of os.environ (primarily for tests)
        overrides: Per-section field values applied last, e.g.
            {"matching": {"max_distance": 2}}

    Returns:
        AppConfig with range-checked matching thresholds

    Raises:
        ValueError: If a variable cannot be parsed or a threshold is out of range
    """
    env = os.environ if environ is None else environ
    sections: Dict[str, Dict[str, Any]] = {"matching": {}, "logging": {}}

    for key, raw in env.items():
        if not key.startswith(ENV_PREFIX):
            continue
        spec = _ENV_FIELDS.get(key[len(ENV_PREFIX):])
        if spec is None:
            logger.debug(f"Ignoring unknown setting {key}")
            continue
        section, name, parse = spec
        try:
            sections[section][name] = parse(raw)
        except ValueError as exc:
            raise ValueError(f"Invalid value for {key}: {exc}") from exc

    for section, values in (overrides or {}).items():
        sections.setdefault(section, {}).update(values)

    cfg = AppConfig()
    cfg = replace(
        cfg,
        matching=replace(cfg.matching, **sections.get("matching", {})),
        logging=replace(cfg.logging, **sections.get("logging", {})),
    )
    validate_matching_config(cfg.matching)
    logger.debug(f"Loaded config: {cfg.to_dict()}")
    return cfg


__all__ = ["load_config", "ENV_PREFIX"]
