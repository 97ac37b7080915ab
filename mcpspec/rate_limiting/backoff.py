# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Exponential backoff for test retries.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BackoffConfig:
    """Shape of the retry delay curve, in milliseconds."""

    initial: int = 1000
    multiplier: float = 2.0
    max: int = 30000


DEFAULT_BACKOFF = BackoffConfig()


def calculate_backoff(attempt: int, config: BackoffConfig = DEFAULT_BACKOFF) -> int:
    """
    Calculate the delay before a retry.

    The delay grows as ``initial * multiplier ** attempt`` and is capped at
    ``config.max``. The function is pure, so callers can test retry timing
    without sleeping.

    Args:
        attempt: Zero-based index of the retry (0 for the first retry)
        config: Backoff parameters

    Returns:
        The delay in milliseconds
    """
    attempt = max(attempt, 0)
    delay = config.initial * (config.multiplier ** attempt)
    return int(min(delay, config.max))
