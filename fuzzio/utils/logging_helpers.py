"""Logging helper utilities for consistent recompute reporting."""

import logging
import click

logger = logging.getLogger(__name__)


def format_recompute_summary(
    total: int,
    cached: int = 0,
    scored: int = 0,
    filtered: int = 0,
    elapsed_seconds: float = 0.0,
    item_name: str = "candidates"
) -> str:
    """Format a recompute summary line with colored counts.

    Args:
        total: Number of haystack entries visited
        cached: Entries whose metrics came from the cache
        scored: Entries scored from scratch
        filtered: Entries dropped by thresholds
        elapsed_seconds: Time spent in the pass
        item_name: Name of items being processed

    Returns:
        Formatted summary string with colors
    """
    parts = [
        f"{click.style(f'{total}', fg='cyan')} {item_name}"
    ]

    if cached > 0:
        parts.append(click.style(f'{cached} cached', fg='blue'))
    if scored > 0:
        parts.append(click.style(f'{scored} scored', fg='green'))
    if filtered > 0:
        parts.append(click.style(f'{filtered} filtered', fg='yellow'))

    if elapsed_seconds > 0:
        parts.append(f"{elapsed_seconds * 1000:.2f}ms")

    return " | ".join(parts)


def log_recompute(
    total: int,
    cached: int = 0,
    scored: int = 0,
    filtered: int = 0,
    elapsed_seconds: float = 0.0,
    target: logging.Logger | None = None,
) -> None:
    """Log a recompute summary at DEBUG level on ``target`` (or this module's logger)."""
    log = target or logger
    if not log.isEnabledFor(logging.DEBUG):
        return
    log.debug(format_recompute_summary(
        total=total,
        cached=cached,
        scored=scored,
        filtered=filtered,
        elapsed_seconds=elapsed_seconds,
    ))


__all__ = ["format_recompute_summary", "log_recompute"]
