# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Configuration handling for mcpspec.

This module provides the engine defaults, overridable through environment
variables and, in the command line runner, through arguments.
"""

import os
from dataclasses import dataclass, field

from mcpspec.rate_limiting.backoff import BackoffConfig


@dataclass
class EngineConfig:
    """Defaults applied to tests that do not set their own values."""
    
    # Per-test limits
    default_timeout_ms: int = 30000
    default_retries: int = 0
    backoff: BackoffConfig = field(default_factory=BackoffConfig)
    
    # Scheduling
    parallelism: int = 1
    
    # Debugging
    debug: bool = False


def _env_flag(name: str, default: str = "0") -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


def load_config_from_env() -> EngineConfig:
    """
    Load configuration from environment variables.
    
    Returns:
        An EngineConfig object populated from environment variables.
    """
    return EngineConfig(
        default_timeout_ms=int(os.environ.get("MCPSPEC_TIMEOUT_MS", "30000")),
        default_retries=int(os.environ.get("MCPSPEC_RETRIES", "0")),
        backoff=BackoffConfig(
            initial=int(os.environ.get("MCPSPEC_BACKOFF_INITIAL_MS", "1000")),
            multiplier=float(os.environ.get("MCPSPEC_BACKOFF_MULTIPLIER", "2")),
            max=int(os.environ.get("MCPSPEC_BACKOFF_MAX_MS", "30000")),
        ),
        parallelism=int(os.environ.get("MCPSPEC_PARALLELISM", "1")),
        debug=_env_flag("MCPSPEC_DEBUG"),
    )
