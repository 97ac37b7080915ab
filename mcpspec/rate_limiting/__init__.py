"""
Retry backoff and call throttling for mcpspec.
"""

from mcpspec.rate_limiting.backoff import BackoffConfig, DEFAULT_BACKOFF, calculate_backoff
from mcpspec.rate_limiting.rate_limiter import RateLimitConfig, RateLimiter

__all__ = [
    'BackoffConfig',
    'DEFAULT_BACKOFF',
    'RateLimitConfig',
    'RateLimiter',
    'calculate_backoff',
]
