# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Error types for mcpspec.

Every error raised by the engine carries an :class:`ErrorCode`, which maps to
the process exit code used by the command line runner.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Categories of engine errors."""

    CONFIG_ERROR = "CONFIG_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    TIMEOUT = "TIMEOUT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    ERROR = "ERROR"


EXIT_CODES = {
    "SUCCESS": 0,
    "TEST_FAILURE": 1,
    "ERROR": 2,
    "CONFIG_ERROR": 3,
    "CONNECTION_ERROR": 4,
    "TIMEOUT": 5,
    "VALIDATION_ERROR": 7,
    "INTERRUPTED": 130,
}


class MCPSpecError(Exception):
    """Base class for all errors raised by mcpspec."""

    def __init__(self, code: ErrorCode, message: str, context: Optional[Dict[str, Any]] = None):
        """
        Initialize the error.

        Args:
            code: The error category
            message: Human readable description
            context: Extra diagnostic values (test name, path, ...)
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = context or {}

    @property
    def exit_code(self) -> int:
        """Process exit code for this error."""
        return EXIT_CODES[self.code.value]


class ConfigurationError(MCPSpecError):
    """A test definition, collection or option cannot be used as given."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(ErrorCode.CONFIG_ERROR, message, context)


class InvalidPathError(ConfigurationError):
    """A path expression is syntactically invalid."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid JSONPath {path!r}: {reason}", {"path": path})
        self.path = path


class TestTimeoutError(MCPSpecError):
    """A single test attempt did not finish in time."""

    __test__ = False

    def __init__(self, test_name: str, timeout_ms: int):
        super().__init__(
            ErrorCode.TIMEOUT,
            f'Test "{test_name}" timed out after {timeout_ms}ms',
            {"testName": test_name, "timeoutMs": timeout_ms},
        )


class ToolInvocationError(MCPSpecError):
    """The server could not be asked, or answered with a protocol error."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(ErrorCode.CONNECTION_ERROR, message, context)


class ExpressionError(MCPSpecError):
    """An assertion expression is outside the supported grammar or failed to evaluate."""

    def __init__(self, expr: str, reason: str):
        super().__init__(ErrorCode.VALIDATION_ERROR, f"Cannot evaluate expression {expr!r}: {reason}",
                         {"expr": expr})


class RateLimiterStoppedError(MCPSpecError):
    """A call was scheduled on a rate limiter that has been stopped."""

    def __init__(self):
        super().__init__(ErrorCode.ERROR, "Rate limiter has been stopped")
