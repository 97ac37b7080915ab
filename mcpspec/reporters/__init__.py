"""
Reporters for mcpspec test runs.
"""

from mcpspec.reporters.base import TestRunReporter
from mcpspec.reporters.console import ConsoleReporter
from mcpspec.reporters.json_reporter import JsonReporter
from mcpspec.reporters.junit import JunitReporter

REPORTERS = {
    "console": ConsoleReporter,
    "json": JsonReporter,
    "junit": JunitReporter,
}

__all__ = [
    'ConsoleReporter',
    'JsonReporter',
    'JunitReporter',
    'REPORTERS',
    'TestRunReporter',
]
