# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later
"""
Console reporter for mcpspec.

Prints one line per test as results arrive and a summary at the end.
"""

import sys
from typing import Optional, TextIO

from mcpspec.models import TestResult, TestRunResult, TestStatus
from mcpspec.reporters.base import TestRunReporter

ICONS = {
    TestStatus.PASSED: "✅",
    TestStatus.FAILED: "❌",
    TestStatus.ERROR: "⚠️",
    TestStatus.SKIPPED: "⏭️",
}


class ConsoleReporter(TestRunReporter):
    """Human readable progress output."""

    def __init__(self, stream: Optional[TextIO] = None, output_path=None):
        super().__init__(output_path)
        self.stream = stream or sys.stdout
        self._lines = []

    def _print(self, line: str = "") -> None:
        self._lines.append(line)
        print(line, file=self.stream)

    def on_run_start(self, collection_name: str, test_count: int) -> None:
        self._print(f"\nRunning {collection_name} ({test_count} tests)\n")

    def on_test_complete(self, result: TestResult) -> None:
        self._print(f"  {ICONS[result.status]} {result.test_name} ({result.duration}ms)")

        if result.status == TestStatus.FAILED:
            for assertion in result.assertions:
                if not assertion.passed:
                    self._print(f"      {assertion.message}")
        elif result.status == TestStatus.ERROR and result.error:
            self._print(f"      {result.error}")

    def on_run_complete(self, result: TestRunResult) -> None:
        summary = result.summary
        parts = []
        if summary.passed:
            parts.append(f"{summary.passed} passed")
        if summary.failed:
            parts.append(f"{summary.failed} failed")
        if summary.errors:
            parts.append(f"{summary.errors} errors")
        if summary.skipped:
            parts.append(f"{summary.skipped} skipped")

        lines = [
            "",
            f"  Tests:  {', '.join(parts) or 'none'} ({summary.total} total)",
            f"  Time:   {summary.duration / 1000:.2f}s",
            "",
        ]
        for line in lines:
            self._print(line)
        self._emit("\n".join(self._lines))
