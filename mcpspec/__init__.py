# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
mcpspec - declarative test runner for MCP servers.

Test collections describe tool calls and the outcomes expected from them;
the engine in :mod:`mcpspec.testing` executes them against a connected
tool client and produces per-test verdicts.
"""

__version__ = "1.0.0"

from mcpspec.models import (
    AssertionDefinition,
    AssertionKind,
    AssertionResult,
    CollectionDefinition,
    ExtractionDefinition,
    SimpleExpectation,
    TestDefinition,
    TestResult,
    TestRunResult,
    TestStatus,
    TestSummary,
)
from mcpspec.testing.executor import TestExecutor
from mcpspec.testing.scheduler import SchedulerOptions, TestScheduler
from mcpspec.testing.runner import RunOptions, TestRunner

__all__ = [
    'AssertionDefinition',
    'AssertionKind',
    'AssertionResult',
    'CollectionDefinition',
    'ExtractionDefinition',
    'RunOptions',
    'SchedulerOptions',
    'SimpleExpectation',
    'TestDefinition',
    'TestExecutor',
    'TestResult',
    'TestRunResult',
    'TestRunner',
    'TestScheduler',
    'TestStatus',
    'TestSummary',
]
